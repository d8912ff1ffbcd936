"""
Authentication and authorization exceptions.
"""


class AuthenticationError(Exception):
    """Raised when the caller cannot be authenticated."""

    pass


class PermissionDeniedError(Exception):
    """Raised when an authenticated principal lacks the required role."""

    pass
