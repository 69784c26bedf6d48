"""
Exceptions raised by the saved-filter service layer.

Routes map AuthenticationError to 401 and AuthorizationError to 403.
Persistence errors are not wrapped; they reach the caller as raised by SQLAlchemy.
"""


class SavedFiltersError(Exception):
    """Base class for service-level errors."""


class AuthenticationError(SavedFiltersError):
    """No identity is available for the current request."""

    def __init__(self, message='Authentication required'):
        super().__init__(message)
        self.message = message


class AuthorizationError(SavedFiltersError):
    """The caller's identity may not perform this action on the record."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message
