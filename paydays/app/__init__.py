"""Application factory and app-wide configuration."""

from __future__ import annotations

from http import HTTPStatus
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS
from loguru import logger
from werkzeug.exceptions import HTTPException

from paydays.app.api.routes import api_bp
from paydays.config import SETTINGS_KEY, Settings, load_settings
from paydays.log import configure_logging

RENDER_FAILURE = "The projection could not be rendered."


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config[SETTINGS_KEY] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        # HTTP errors (404, malformed JSON, ...) keep Flask's own responses
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("request failed: {}", exc)
        return jsonify({"detail": RENDER_FAILURE}), HTTPStatus.INTERNAL_SERVER_ERROR

    logger.info(
        "paydays api ready (max_points={}, compare_spread={})",
        settings.max_points,
        settings.compare_spread,
    )
    return app
