"""
Exception hierarchy for SpellSchool.

Kept free of Flask imports so pure ``logics`` packages can raise these;
``core.error_handlers`` turns them into JSON responses.
"""

from typing import Optional, Dict, Any


class SpellSchoolError(Exception):
    """Base exception class for SpellSchool."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


class NotFoundError(SpellSchoolError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ValidationError(SpellSchoolError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


class InvalidConfig(ValidationError):
    """A level curve configuration cannot produce a valid table."""

    def __init__(self, message: str = 'Invalid level curve configuration', errors: Dict = None):
        super().__init__(message=message, errors=errors)
        self.code = 'INVALID_CONFIG'
