"""API blueprints mounted by the app factory, as ``module:attribute`` import paths."""

from __future__ import annotations

from typing import Iterable

from flask import Blueprint, Flask
from werkzeug.utils import import_string

API_BLUEPRINTS = (
    "spellschool_app.modules.gamification:gamification_api_bp",
    "spellschool_app.modules.session:session_api_bp",
)


def register_api_blueprints(app: Flask, import_paths: Iterable[str] = API_BLUEPRINTS) -> None:
    """Import each blueprint and register it under its own ``url_prefix``."""

    for path in import_paths:
        blueprint = import_string(path)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(f"'{path}' is not a Flask Blueprint (got {type(blueprint).__name__})")
        app.register_blueprint(blueprint)
        app.logger.debug("Registered %s at %s", blueprint.name, blueprint.url_prefix)
