"""
Tests for profile/settings preferences and the theme config.
"""

import pytest

from mindcompanion import preferences
from mindcompanion.preferences import PreferenceError


class TestDefaults:

    def test_new_user_preferences(self):
        prefs = preferences.new_user_preferences()
        assert prefs == {
            "sharedMemory": True,
            "weeklyEmails": True,
            "interests": [],
            "topics": [],
            "goals": [],
        }

    def test_new_user_preferences_are_independent(self):
        first = preferences.new_user_preferences()
        first["interests"].append("music")
        assert preferences.new_user_preferences()["interests"] == []

    def test_settings_fill_missing_values(self):
        settings = preferences.settings_preferences({"darkMode": True, "chatPreferences": {"textSize": "lg"}})
        assert settings["darkMode"] is True
        assert settings["accentColor"] == "indigo"
        assert settings["chatPreferences"]["textSize"] == "lg"
        assert settings["chatPreferences"]["aiBubbleColor"] == "gray"

    def test_settings_from_nothing(self):
        assert preferences.settings_preferences(None) == preferences.DEFAULT_SETTINGS


class TestMerge:

    def test_merge_profile_keeps_settings(self):
        stored = {"darkMode": True, "interests": ["art"]}
        merged = preferences.merge_profile(stored, {"weeklyEmails": False})
        assert merged["darkMode"] is True
        assert merged["weeklyEmails"] is False
        assert merged["interests"] == ["art"]

    def test_merge_settings_partial_chat_preferences(self):
        merged = preferences.merge_settings({}, {"chatPreferences": {"soundEnabled": True}})
        assert merged["chatPreferences"]["soundEnabled"] is True
        assert merged["chatPreferences"]["autoSave"] is True

    @pytest.mark.parametrize("updates", [
        {"accentColor": "black"},
        {"darkMode": "yes"},
        {"chatPreferences": {"textSize": "huge"}},
        {"chatPreferences": "compact"},
        {"chatPreferences": {"textSize": ["lg"]}},
        {"chatPreferences": {"userBubbleColor": {"a": 1}}},
        {"accentColor": 7},
        {"unknown": 1},
    ])
    def test_merge_settings_rejects_bad_values(self, updates):
        with pytest.raises(PreferenceError):
            preferences.merge_settings({}, updates)

    def test_merge_profile_rejects_non_string_lists(self):
        with pytest.raises(PreferenceError):
            preferences.merge_profile({}, {"goals": [1, 2]})


class TestListFields:

    def test_add_and_remove(self):
        prefs = preferences.add_list_item({}, "interests", "  hiking ")
        prefs = preferences.add_list_item(prefs, "interests", "reading")
        assert prefs["interests"] == ["hiking", "reading"]
        prefs = preferences.remove_list_item(prefs, "interests", 0)
        assert prefs["interests"] == ["reading"]

    def test_blank_value_rejected(self):
        with pytest.raises(PreferenceError):
            preferences.add_list_item({}, "goals", "   ")

    def test_unknown_field_rejected(self):
        with pytest.raises(PreferenceError):
            preferences.add_list_item({}, "hobbies", "chess")

    def test_index_out_of_range(self):
        with pytest.raises(PreferenceError):
            preferences.remove_list_item({"topics": ["sleep"]}, "topics", 3)


class TestThemeConfig:

    def test_default_theme(self):
        theme = preferences.theme_config(None)
        assert theme.dark_mode is False
        assert theme.accent_color == "indigo"
        assert theme.user_bubble_class == "bg-indigo-500"
        assert theme.ai_bubble_class == "bg-gray-100"
        assert theme.text_size_class == "text-base"
        assert theme.background_class == "bg-white"

    def test_custom_theme(self):
        theme = preferences.theme_config({
            "darkMode": True,
            "accentColor": "pink",
            "chatPreferences": {"userBubbleColor": "teal", "textSize": "xl", "chatBackground": "green"},
        })
        assert theme.dark_mode is True
        assert theme.accent_color == "pink"
        assert theme.user_bubble_class == "bg-teal-500"
        assert theme.text_size_class == "text-xl"
        assert theme.background_class == "bg-green-50"

    def test_unknown_stored_values_fall_back(self):
        theme = preferences.theme_config({"chatPreferences": {"userBubbleColor": "plaid", "textSize": "?"}})
        assert theme.user_bubble_class == "bg-indigo-600"
        assert theme.text_size_class == "text-base"
