"""
Shared infrastructure for Studyhall backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- firebase: Firebase Admin app and Firestore client factory
- payments: Stripe client factory
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .firebase import get_firebase_app, get_firestore_client, reset_client_cache
from .payments import get_stripe_client, reset_stripe_client
from .exceptions import (
    StudyhallError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import CurrentUser

__all__ = [
    "Settings",
    "get_settings",
    "get_firebase_app",
    "get_firestore_client",
    "reset_client_cache",
    "get_stripe_client",
    "reset_stripe_client",
    "StudyhallError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "CurrentUser",
]
