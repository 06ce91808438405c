"""Errors raised by request parsing and the document store.

Every error knows the HTTP status it maps to, so route handlers can let them
propagate and the application error handler renders them as JSON.
"""


class StoreError(Exception):
    """Base class for store failures."""
    status_code = 500

    def __init__(self, message=None):
        super().__init__(message or self.__class__.__doc__)
        self.message = message or self.__class__.__doc__

    def to_dict(self):
        return {'error': self.message}


class DuplicateUsernameError(StoreError):
    """Username already exists"""
    status_code = 409


class UserNotFoundError(StoreError):
    """User not found"""
    status_code = 404


class HealthLogAlreadyAttachedError(StoreError):
    """Health log already belongs to another user"""
    status_code = 409


class ValidationError(StoreError):
    """Invalid input"""
    status_code = 400
