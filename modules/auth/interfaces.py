"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with fakes instead of a live Firebase project.
"""

from datetime import timedelta
from typing import Protocol, runtime_checkable

from .models import ProviderUser, TokenClaims


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for identity-provider operations.

    Implementations translate provider failures into InvalidTokenError
    or ExpiredTokenError.
    """

    async def create_session_cookie(self, id_token: str, expires_in: timedelta) -> str:
        """
        Exchange a short-lived ID token for a signed session cookie.

        Args:
            id_token: Firebase ID token from the client SDK
            expires_in: Validity window of the cookie

        Returns:
            The session cookie value

        Raises:
            AuthenticationError: If the token is rejected
        """
        ...

    async def verify_id_token(self, id_token: str) -> TokenClaims:
        """
        Verify an ID token and return its claims.

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        ...

    async def verify_session_cookie(self, session_cookie: str) -> TokenClaims:
        """
        Verify a session cookie (including revocation) and return its claims.

        Raises:
            AuthenticationError: If the cookie is invalid, revoked or expired
        """
        ...

    async def get_user(self, uid: str) -> ProviderUser:
        """
        Get the identity provider's record for a user.

        Raises:
            AuthenticationError: If the user no longer exists
        """
        ...
