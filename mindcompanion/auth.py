import re
import logging
from functools import wraps

from flask import current_app, jsonify, session
from werkzeug.security import generate_password_hash, check_password_hash

from .preferences import new_user_preferences

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
MIN_PASSWORD_LENGTH = 6


class AuthError(Exception):
    def __init__(self, message, status=400):
        super().__init__(message)
        self.message = message
        self.status = status


def validate_email(email):
    if not email or not isinstance(email, str): return False, "Email is required"
    email = email.strip().lower()
    if len(email) > 254: return False, "Email is too long"
    if not EMAIL_PATTERN.match(email): return False, "Email address is badly formatted"
    return True, email


def validate_password(password):
    if not password or not isinstance(password, str): return False, "Password is required"
    if len(password) < MIN_PASSWORD_LENGTH: return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return True, password


def validate_name(name):
    if name is None: return True, ""
    if not isinstance(name, str): return False, "Name must be text"
    name = name.strip()
    if len(name) > 100: return False, "Name must be less than 100 characters"
    return True, name


def public_user(user):
    return {k: v for k, v in user.items() if k != "password_hash"}


def register(store, email, password, name=""):
    for ok, value in (validate_email(email), validate_password(password), validate_name(name)):
        if not ok:
            raise AuthError(value)
    email = validate_email(email)[1]
    _, existing = store.find_user_by_email(email)
    if existing:
        raise AuthError("Email address is already in use", 409)
    user = store.create_user({
        "email": email,
        "name": validate_name(name)[1],
        "password_hash": generate_password_hash(password),
        "preferences": new_user_preferences(),
    })
    logger.info(f"Registered user {user['uid']}")
    return user


def authenticate(store, email, password):
    ok, email = validate_email(email)
    if not ok or not isinstance(password, str):
        raise AuthError("Invalid email or password", 401)
    _, user = store.find_user_by_email(email)
    if not user or not check_password_hash(user["password_hash"], password):
        raise AuthError("Invalid email or password", 401)
    return user


def login_user(user):
    session.clear()
    session["uid"] = user["uid"]
    session.permanent = True


def require_auth(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        store = current_app.extensions["document_store"]
        if "uid" not in session or store.get_user(session["uid"]) is None:
            session.clear()
            return jsonify({"error": "Authentication required"}), 401
        return f(*args, **kwargs)
    return decorated_function
