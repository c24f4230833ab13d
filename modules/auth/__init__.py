"""
Authentication module.

Handles Firebase session cookies: issuing and clearing them, and resolving
them into the current user.

Public API:
- IAuthService: Interface for identity-provider operations
- SessionResolver: Session cookie -> CurrentUser
- TokenClaims, ProviderUser: Identity data from Firebase Auth
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import TokenClaims, ProviderUser, SessionCreateRequest, SuccessResponse
from .session import SessionResolver
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingSessionError,
    MissingIdTokenError,
    SessionCreationError,
)

__all__ = [
    # Interface
    "IAuthService",
    "SessionResolver",
    # Models
    "TokenClaims",
    "ProviderUser",
    "SessionCreateRequest",
    "SuccessResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingSessionError",
    "MissingIdTokenError",
    "SessionCreationError",
]
