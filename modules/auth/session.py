"""
Session resolver.

Turns the session cookie of an inbound request into a CurrentUser by
verifying it with the identity provider and merging the stored profile.
"""

from typing import Optional
import logging

from shared.exceptions import AuthenticationError, ExternalServiceError
from shared.models import CurrentUser
from modules.users.interfaces import IProfileRepository

from .interfaces import IAuthService

logger = logging.getLogger(__name__)


class SessionResolver:
    """
    Resolves the caller's identity from a session cookie.

    resolve() never raises: an absent, expired, forged or revoked cookie,
    or a failing collaborator, all yield None.
    """

    def __init__(self, auth: IAuthService, profiles: IProfileRepository):
        self._auth = auth
        self._profiles = profiles

    async def resolve(self, session_cookie: Optional[str]) -> Optional[CurrentUser]:
        """
        Resolve the current user for a session cookie value.

        Identity fields come from the provider's user record; the billing
        linkage and subscription fields come from the profile document.
        """
        if not session_cookie:
            return None

        try:
            claims = await self._auth.verify_session_cookie(session_cookie)
            record = await self._auth.get_user(claims.uid)
            profile = self._profiles.get(claims.uid) or {}
        except (AuthenticationError, ExternalServiceError) as e:
            logger.debug("Session cookie rejected: %s", e.message)
            return None

        return CurrentUser(
            uid=claims.uid,
            email=record.email,
            photo_url=record.photo_url,
            stripe_customer_id=profile.get("stripeCustomerId"),
            subscription_tier=profile.get("subscriptionTier"),
            subscription_status=profile.get("subscriptionStatus"),
            price_id=profile.get("priceId"),
            current_period_end=profile.get("currentPeriodEnd"),
            completed_tasks=profile.get("completedTasks") or [],
        )
