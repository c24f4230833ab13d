"""
Authentication module exceptions.

These exceptions are raised by the auth module and mapped to HTTP
responses by the API error handlers.
"""

from shared.exceptions import AuthenticationError, ValidationError


class InvalidTokenError(AuthenticationError):
    """Raised when an ID token or session cookie is invalid or revoked."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when an ID token or session cookie has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingSessionError(AuthenticationError):
    """Raised when a protected route is called without a valid session."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")


class SessionCreationError(AuthenticationError):
    """Raised when an ID token cannot be exchanged for a session."""

    def __init__(self, message: str = "Failed to create session"):
        super().__init__(message, code="SESSION_CREATION_FAILED")


class MissingIdTokenError(ValidationError):
    """Raised when the session request carries no ID token."""

    def __init__(self):
        super().__init__("Missing idToken", code="MISSING_ID_TOKEN")
