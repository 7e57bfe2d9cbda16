"""Application configuration defaults and loading."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from flask import Flask

ENV_PREFIX = "INVESTCALC"

DEFAULTS: Dict[str, Any] = {
    "CORS_ORIGINS": [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    "LOG_LEVEL": "INFO",
}


def load_config(app: Flask, overrides: Optional[Mapping[str, Any]] = None) -> None:
    """Populate ``app.config``: defaults, then ``INVESTCALC_*`` env vars, then ``overrides``.

    Env values are parsed as JSON where possible, so
    ``INVESTCALC_CORS_ORIGINS='["https://example.com"]'`` yields a list.
    """
    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env(ENV_PREFIX)
    if overrides:
        app.config.from_mapping(overrides)

    origins = app.config["CORS_ORIGINS"]
    if isinstance(origins, str):
        app.config["CORS_ORIGINS"] = [origin.strip() for origin in origins.split(",") if origin.strip()]
