"""
Error Handlers for SpellSchool

Provides:
- Consistent error response format
- Flask error handlers for the exception hierarchy in ``core.exceptions``
"""

from flask import jsonify, request, current_app
from typing import Dict

from .exceptions import (
    InvalidConfig,
    NotFoundError,
    SpellSchoolError,
    ValidationError,
)

__all__ = [
    'InvalidConfig',
    'NotFoundError',
    'SpellSchoolError',
    'ValidationError',
    'error_response',
    'register_error_handlers',
]


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(SpellSchoolError)
    def handle_spellschool_error(error):
        current_app.logger.warning(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if request.path.startswith('/api/'):
            return error_response('Method not allowed', 'METHOD_NOT_ALLOWED', 405)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
