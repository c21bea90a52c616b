"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging

from flask import Flask

from .error_handlers import register_error_handlers
from .logging_config import setup_logging
from .module_registry import register_api_blueprints


def configure_logging(app: Flask) -> None:
    """Configure the ``spellschool`` logger tree and the Flask app logger."""

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
    )

    if app.logger.handlers:
        return

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)
    app.logger.propagate = False
    app.logger.debug("Flask app logger configured successfully.")


def register_handlers(app: Flask) -> None:
    """Attach JSON error handlers."""

    register_error_handlers(app)


def register_blueprints(app: Flask) -> None:
    """Register the JSON API blueprints."""

    register_api_blueprints(app)


def register_event_handlers(app: Flask) -> None:
    """Import module event handlers so their signal receivers get connected."""

    from ..modules.gamification import events  # noqa: F401

    app.logger.debug("Gamification event handlers connected.")
