"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from investment_calculator.app.api.routes import api_bp
from investment_calculator.config import load_config
from investment_calculator.utils.logging import get_logger, setup_logging


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    load_config(app, config)

    setup_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    get_logger(__name__).debug("CORS origins: %s", app.config["CORS_ORIGINS"])
    return app
