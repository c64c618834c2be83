"""MindCompanion: a mental health chat companion service."""
import os
import logging

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS

from .config import default_config
from .store import DocumentStore
from .views import api, limiter

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    test_config = test_config or {}
    app = Flask(__name__, static_folder="frontend", static_url_path="")
    app.config.update(default_config(secret_key=test_config.get("SECRET_KEY")))
    app.config.update(test_config)

    os.makedirs(app.config["DATA_DIR"], exist_ok=True)
    app.extensions["document_store"] = DocumentStore(app.config["DATA_DIR"])

    CORS(
        app,
        supports_credentials=True,
        resources={
            r"/api/*": {
                "origins": app.config["CORS_ORIGINS"],
                "methods": ["GET", "POST", "PUT", "PATCH", "DELETE"],
                "allow_headers": ["Content-Type"]
            }
        }
    )
    limiter.init_app(app)
    app.register_blueprint(api)

    @app.route("/")
    def landing():
        return send_from_directory(app.static_folder, "index.html")

    @app.errorhandler(404)
    def not_found(error): return jsonify({"error": "Not Found"}), 404
    @app.errorhandler(405)
    def method_not_allowed(error): return jsonify({"error": "Method Not Allowed"}), 405
    @app.errorhandler(429)
    def ratelimit_handler(e): return jsonify({"error": "Rate limit exceeded."}), 429
    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal Server Error: {error}")
        return jsonify({"error": "An internal error occurred."}), 500

    logger.info(f"App created | data dir: {app.config['DATA_DIR']}")
    return app
