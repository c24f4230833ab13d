"""
User profile module.

Owns the users/{uid} profile documents that hold data Firebase Auth does
not: the Stripe customer linkage and subscription state.

Public API:
- IProfileRepository: Interface for profile reads and merge-writes
- ProfileRepository: Firestore implementation
"""

from .interfaces import IProfileRepository
from .repository import ProfileRepository, USERS_COLLECTION

__all__ = [
    "IProfileRepository",
    "ProfileRepository",
    "USERS_COLLECTION",
]
