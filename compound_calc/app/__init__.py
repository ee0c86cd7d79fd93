"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from compound_calc.app.api.routes import api_bp

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _load_config(app: Flask, overrides: Optional[Mapping[str, Any]]) -> None:
    origins = os.environ.get("COMPOUND_CALC_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    app.config["CORS_ORIGINS"] = [origin.strip() for origin in origins.split(",") if origin.strip()]
    app.config["LOG_LEVEL"] = os.environ.get("COMPOUND_CALC_LOG_LEVEL", "INFO").upper()
    if overrides:
        app.config.update(overrides)


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    _load_config(app, config)

    logging.getLogger("compound_calc").setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
