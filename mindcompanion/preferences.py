"""Profile and settings preferences, plus the theme handed to the client.

Stored preference documents may be partial or written by older versions, so
every read goes through ``profile_preferences`` / ``settings_preferences``
which fill in defaults. ``ThemeConfig`` resolves the stored choices into the
CSS classes the chat view needs.
"""
import copy
from collections import namedtuple

ACCENT_COLORS = ("indigo", "purple", "pink", "blue", "green", "orange")

BUBBLE_COLORS = {
    "blue": "bg-blue-500",
    "indigo": "bg-indigo-500",
    "purple": "bg-purple-500",
    "pink": "bg-pink-500",
    "green": "bg-green-500",
    "orange": "bg-orange-500",
    "red": "bg-red-500",
    "teal": "bg-teal-500",
    "gray": "bg-gray-100",
}

TEXT_SIZES = {"sm": "text-sm", "md": "text-base", "lg": "text-lg", "xl": "text-xl"}

CHAT_BACKGROUNDS = {
    "light": "bg-white",
    "gray": "bg-gray-50",
    "blue": "bg-blue-50",
    "purple": "bg-purple-50",
    "green": "bg-green-50",
    "pink": "bg-pink-50",
}

LIST_FIELDS = ("interests", "topics", "goals")

DEFAULT_PROFILE = {
    "sharedMemory": True,
    "weeklyEmails": True,
    "interests": [],
    "topics": [],
    "goals": [],
}

DEFAULT_CHAT_PREFERENCES = {
    "autoSave": True,
    "typingIndicator": True,
    "soundEnabled": False,
    "textSize": "md",
    "userBubbleColor": "indigo",
    "aiBubbleColor": "gray",
    "chatBackground": "light",
}

DEFAULT_SETTINGS = {
    "sharedMemory": True,
    "weeklyEmails": True,
    "darkMode": False,
    "accentColor": "indigo",
    "chatPreferences": DEFAULT_CHAT_PREFERENCES,
}

_CHOICES = {
    "accentColor": ACCENT_COLORS,
    "textSize": TEXT_SIZES,
    "userBubbleColor": BUBBLE_COLORS,
    "aiBubbleColor": BUBBLE_COLORS,
    "chatBackground": CHAT_BACKGROUNDS,
}


class PreferenceError(ValueError):
    pass


def new_user_preferences():
    return copy.deepcopy(DEFAULT_PROFILE)


def _with_defaults(stored, defaults):
    merged = copy.deepcopy(defaults)
    for key, value in (stored or {}).items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _with_defaults(value, merged[key])
        elif value is not None:
            merged[key] = value
    return merged


def profile_preferences(stored):
    prefs = _with_defaults(stored, DEFAULT_PROFILE)
    return {key: prefs[key] for key in DEFAULT_PROFILE}


def settings_preferences(stored):
    prefs = _with_defaults(stored, DEFAULT_SETTINGS)
    return {key: prefs[key] for key in DEFAULT_SETTINGS}


def _check(key, value, default):
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise PreferenceError(f"{key} must be true or false")
    elif isinstance(default, list):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise PreferenceError(f"{key} must be a list of strings")
    elif key in _CHOICES and (not isinstance(value, str) or value not in _CHOICES[key]):
        raise PreferenceError(f"{key} must be one of: {', '.join(_CHOICES[key])}")


def validate(updates, defaults):
    """Raise PreferenceError unless every key in ``updates`` is known and well typed."""
    if not isinstance(updates, dict):
        raise PreferenceError("Preferences must be an object")
    for key, value in updates.items():
        if key not in defaults:
            raise PreferenceError(f"Unknown preference: {key}")
        if isinstance(defaults[key], dict):
            validate(value, defaults[key])
        else:
            _check(key, value, defaults[key])
    return updates


def merge_profile(stored, updates):
    validate(updates, DEFAULT_PROFILE)
    merged = dict(stored or {})
    merged.update(profile_preferences(dict(profile_preferences(stored), **updates)))
    return merged


def merge_settings(stored, updates):
    validate(updates, DEFAULT_SETTINGS)
    merged = dict(stored or {})
    current = settings_preferences(stored)
    chat_updates = updates.get("chatPreferences", {})
    current.update({k: v for k, v in updates.items() if k != "chatPreferences"})
    current["chatPreferences"] = dict(current["chatPreferences"], **chat_updates)
    merged.update(current)
    return merged


def add_list_item(stored, field, value):
    if field not in LIST_FIELDS:
        raise PreferenceError(f"Unknown list: {field}")
    if not isinstance(value, str) or not value.strip():
        raise PreferenceError("Value is required")
    items = profile_preferences(stored)[field] + [value.strip()]
    return merge_profile(stored, {field: items})


def remove_list_item(stored, field, index):
    if field not in LIST_FIELDS:
        raise PreferenceError(f"Unknown list: {field}")
    items = profile_preferences(stored)[field]
    if not 0 <= index < len(items):
        raise PreferenceError("Index out of range")
    return merge_profile(stored, {field: [v for i, v in enumerate(items) if i != index]})


ThemeConfig = namedtuple("ThemeConfig", [
    "dark_mode", "accent_color", "user_bubble_class", "ai_bubble_class",
    "text_size_class", "background_class",
])


def theme_config(stored):
    """Build the theme the client applies instead of toggling document state."""
    settings = settings_preferences(stored)
    chat = settings["chatPreferences"]
    return ThemeConfig(
        dark_mode=settings["darkMode"],
        accent_color=settings["accentColor"],
        user_bubble_class=BUBBLE_COLORS.get(chat["userBubbleColor"], "bg-indigo-600"),
        ai_bubble_class=BUBBLE_COLORS.get(chat["aiBubbleColor"], "bg-gray-100"),
        text_size_class=TEXT_SIZES.get(chat["textSize"], "text-base"),
        background_class=CHAT_BACKGROUNDS.get(chat["chatBackground"], "bg-white"),
    )
