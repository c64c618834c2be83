import os
import logging

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

IS_DEPLOYED = "SPACE_ID" in os.environ


# Secure configuration for SECRET_KEY
def get_secret_key():
    secret_key = os.environ.get('SECRET_KEY')
    if not secret_key:
        if os.environ.get('FLASK_ENV') == 'development':
            logger.warning("Using a temporary development secret key. Set SECRET_KEY in .env for production.")
            return 'dev-secret-key-not-for-production'
        raise ValueError("SECRET_KEY must be set in environment variables for production")
    return secret_key


def session_settings(deployed=IS_DEPLOYED):
    if deployed:
        return dict(
            SESSION_COOKIE_SECURE=True,
            SESSION_COOKIE_SAMESITE='None',
            SESSION_COOKIE_HTTPONLY=True,
            PERMANENT_SESSION_LIFETIME=3600
        )
    return dict(
        SESSION_COOKIE_SECURE=False,
        SESSION_COOKIE_SAMESITE='Lax',
        SESSION_COOKIE_HTTPONLY=True,
        PERMANENT_SESSION_LIFETIME=3600
    )


def allowed_origins(deployed=IS_DEPLOYED):
    origins = []
    if deployed:
        space_host = os.environ.get("SPACE_HOST")
        if space_host:
            origins.append(f"https://{space_host}")
    else:
        origins.append(os.environ.get("ALLOWED_ORIGINS", "http://localhost:3000"))
    return origins


def default_config(secret_key=None):
    """Settings read from the environment when the app is created."""
    config = dict(
        SECRET_KEY=secret_key or get_secret_key(),
        DATA_DIR=os.environ.get("DATA_DIR", "data"),
        CORS_ORIGINS=allowed_origins(),
        MAX_MESSAGE_LENGTH=1000,
        RECENT_CHATS_LIMIT=5,
    )
    config.update(session_settings())
    return config
