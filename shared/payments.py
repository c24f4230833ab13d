"""
Stripe client factory.

The Stripe client is a stateless command issuer, so a single instance is
shared by every request.
"""

from typing import Optional

import stripe

from .config import get_settings

_stripe_client: Optional[stripe.StripeClient] = None


def get_stripe_client() -> stripe.StripeClient:
    """
    Get the Stripe client configured with the secret key.

    Raises:
        RuntimeError: If STRIPE_SECRET_KEY is not set
    """
    global _stripe_client

    if _stripe_client is None:
        settings = get_settings()
        if not settings.stripe_secret_key:
            raise RuntimeError(
                "Stripe configuration missing. "
                "Set STRIPE_SECRET_KEY environment variable."
            )
        _stripe_client = stripe.StripeClient(settings.stripe_secret_key)

    return _stripe_client


def reset_stripe_client() -> None:
    """Reset the cached Stripe client (for testing)."""
    global _stripe_client
    _stripe_client = None
