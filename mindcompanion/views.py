import logging
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request, session
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from . import auth, preferences
from .auth import AuthError, require_auth
from .mailer import schedule_weekly_email
from .preferences import PreferenceError
from .responder import random_response, select_response

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")

# Rate limiting
limiter = Limiter(key_func=get_remote_address, default_limits=["200 per day", "50 per hour"])


def get_store():
    return current_app.extensions["document_store"]


def current_user():
    return get_store().get_user(session["uid"])


class RequestError(Exception):
    pass


def json_body():
    """Parsed JSON object body; a missing or unparsable body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RequestError("Request body must be a JSON object")
    return data


def validate_message(message):
    max_length = current_app.config["MAX_MESSAGE_LENGTH"]
    if not message or not isinstance(message, str): return False, "Message is required"
    message = message.strip()
    if len(message) < 1: return False, "Message cannot be empty"
    if len(message) > max_length: return False, f"Message is too long (max {max_length} characters)"
    return True, message


def generate_reply(message):
    """Reply for a stored chat; any failure falls back to a generic reply."""
    try:
        return select_response(message)
    except Exception as e:
        logger.error(f"Reply generation failed, using random fallback: {e}")
        return random_response()


def utc_timestamp():
    return datetime.now(timezone.utc).isoformat()


@api.errorhandler(AuthError)
def auth_error(e):
    return jsonify({"error": e.message}), e.status


@api.errorhandler(RequestError)
def request_error(e):
    return jsonify({"error": str(e)}), 400


@api.errorhandler(PreferenceError)
def preference_error(e):
    return jsonify({"error": str(e)}), 400


# --- Authentication ---

@api.route("/auth/signup", methods=["POST"])
@limiter.limit("10 per minute")
def signup():
    data = json_body()
    user = auth.register(get_store(), data.get("email"), data.get("password"), data.get("name", ""))
    auth.login_user(user)
    return jsonify(auth.public_user(user)), 201


@api.route("/auth/login", methods=["POST"])
@limiter.limit("10 per minute")
def login():
    data = json_body()
    user = auth.authenticate(get_store(), data.get("email"), data.get("password"))
    auth.login_user(user)
    logger.info(f"User {user['uid']} logged in")
    return jsonify(auth.public_user(user))


@api.route("/auth/logout", methods=["POST"])
@require_auth
def logout():
    session.clear()
    return jsonify({"message": "Logged out successfully"})


@api.route("/auth/me", methods=["GET"])
@require_auth
def me():
    return jsonify(auth.public_user(current_user()))


# --- Profile & settings ---

def profile_view(user):
    return {
        "name": user.get("name", ""),
        "email": user.get("email", ""),
        "gender": user.get("gender", ""),
        "age": user.get("age", 0),
        "preferences": preferences.profile_preferences(user.get("preferences")),
    }


def settings_view(user):
    stored = user.get("preferences")
    return {
        "name": user.get("name", ""),
        "preferences": preferences.settings_preferences(stored),
        "theme": preferences.theme_config(stored)._asdict(),
    }


@api.route("/profile", methods=["GET"])
@require_auth
def get_profile():
    return jsonify(profile_view(current_user()))


@api.route("/profile", methods=["PATCH"])
@require_auth
def update_profile():
    data = json_body()
    user = current_user()
    fields = {}
    if "name" in data:
        ok, name = auth.validate_name(data["name"])
        if not ok: return jsonify({"error": name}), 400
        fields["name"] = name
    if "gender" in data:
        if not isinstance(data["gender"], str): return jsonify({"error": "Gender must be text"}), 400
        fields["gender"] = data["gender"].strip()
    if "age" in data:
        age = data["age"]
        if not isinstance(age, int) or isinstance(age, bool) or not 0 <= age <= 150:
            return jsonify({"error": "Age must be a whole number between 0 and 150"}), 400
        fields["age"] = age
    if "preferences" in data:
        fields["preferences"] = preferences.merge_profile(user.get("preferences"), data["preferences"])
    user = get_store().update_user(session["uid"], fields)
    return jsonify(profile_view(user))


@api.route("/profile/<field>", methods=["POST"])
@require_auth
def add_profile_item(field):
    data = json_body()
    user = current_user()
    prefs = preferences.add_list_item(user.get("preferences"), field, data.get("value"))
    user = get_store().update_user(session["uid"], {"preferences": prefs})
    return jsonify(profile_view(user))


@api.route("/profile/<field>/<int:index>", methods=["DELETE"])
@require_auth
def remove_profile_item(field, index):
    user = current_user()
    prefs = preferences.remove_list_item(user.get("preferences"), field, index)
    user = get_store().update_user(session["uid"], {"preferences": prefs})
    return jsonify(profile_view(user))


@api.route("/settings", methods=["GET"])
@require_auth
def get_settings():
    return jsonify(settings_view(current_user()))


@api.route("/settings", methods=["PUT"])
@require_auth
def save_settings():
    data = json_body()
    user = current_user()
    fields = {"preferences": preferences.merge_settings(user.get("preferences"), data.get("preferences", {}))}
    if "name" in data:
        ok, name = auth.validate_name(data["name"])
        if not ok: return jsonify({"error": name}), 400
        fields["name"] = name
    user = get_store().update_user(session["uid"], fields)
    return jsonify(settings_view(user))


@api.route("/settings/theme", methods=["GET"])
@require_auth
def get_theme():
    return jsonify(preferences.theme_config(current_user().get("preferences"))._asdict())


# --- Chat ---

@api.route("/chat", methods=["POST"])
@limiter.limit("60 per minute")
def chat():
    try:
        data = request.get_json()
        logger.info("Using keyword response for incoming message")
        response = select_response(data["message"])
    except Exception as e:
        logger.error(f"Error in chat API: {e}")
        response = select_response("Hello")
    return jsonify({"response": response, "timestamp": utc_timestamp()})


@api.route("/chats", methods=["GET"])
@require_auth
def list_chats():
    limit = request.args.get("limit", current_app.config["RECENT_CHATS_LIMIT"], type=int)
    if limit < 1:
        return jsonify({"error": "limit must be at least 1"}), 400
    return jsonify({"chats": get_store().list_chats(session["uid"], limit=limit)})


@api.route("/chats", methods=["POST"])
@require_auth
def create_chat():
    data = json_body()
    shared = preferences.profile_preferences(current_user().get("preferences"))["sharedMemory"]
    title = data.get("title") or "New Chat"
    if not isinstance(title, str): return jsonify({"error": "Title must be text"}), 400
    chat = get_store().create_chat(session["uid"], title=title.strip()[:100], shared_memory=shared)
    return jsonify(chat), 201


@api.route("/chats/<chat_id>", methods=["GET"])
@require_auth
def get_chat(chat_id):
    store = get_store()
    chat = store.get_chat(session["uid"], chat_id)
    if chat is None:
        return jsonify({"error": "Chat not found"}), 404
    return jsonify(dict(chat, messages=store.list_messages(session["uid"], chat_id)))


@api.route("/chats/<chat_id>", methods=["PATCH"])
@require_auth
def update_chat(chat_id):
    data = json_body()
    fields = {}
    if "title" in data:
        if not isinstance(data["title"], str) or not data["title"].strip():
            return jsonify({"error": "Title must be non-empty text"}), 400
        fields["title"] = data["title"].strip()[:100]
    if "sharedMemory" in data:
        if not isinstance(data["sharedMemory"], bool):
            return jsonify({"error": "sharedMemory must be true or false"}), 400
        fields["sharedMemory"] = data["sharedMemory"]
    chat = get_store().update_chat(session["uid"], chat_id, fields)
    if chat is None:
        return jsonify({"error": "Chat not found"}), 404
    return jsonify(chat)


@api.route("/chats/<chat_id>", methods=["DELETE"])
@require_auth
def delete_chat(chat_id):
    if not get_store().delete_chat(session["uid"], chat_id):
        return jsonify({"error": "Chat not found"}), 404
    return jsonify({"message": "Chat deleted"})


@api.route("/chats/<chat_id>/messages", methods=["POST"])
@require_auth
@limiter.limit("60 per minute")
def send_message(chat_id):
    data = json_body()
    is_valid, text = validate_message(data.get("message", ""))
    if not is_valid: return jsonify({"error": text}), 400

    uid = session["uid"]
    store = get_store()
    user_message = store.add_message(uid, chat_id, text, "user")
    if user_message is None:
        return jsonify({"error": "Chat not found"}), 404

    ai_message = store.add_message(uid, chat_id, generate_reply(text), "ai")
    chat = store.update_chat(uid, chat_id, {
        "updatedAt": ai_message["timestamp"],
        "lastMessage": text,
        "messageCount": len(store.list_messages(uid, chat_id)),
    })
    return jsonify({"chat": chat, "messages": [user_message, ai_message]}), 201


# --- Email ---

@api.route("/email", methods=["POST"])
@limiter.limit("10 per minute")
def email():
    try:
        data = request.get_json()
        return jsonify(schedule_weekly_email(data.get("userId"), data.get("email"), data.get("name")))
    except Exception as e:
        logger.error(f"Error in email API: {e}")
        return jsonify({"error": "Failed to send email"}), 500
