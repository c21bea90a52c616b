from flask import Blueprint

session_api_bp = Blueprint(
    'session_api',
    __name__,
    url_prefix='/api/session'
)

from . import routes  # noqa: E402,F401
