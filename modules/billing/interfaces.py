"""
Billing module interfaces.

IBillingService is what the API layer uses; IPaymentGateway is the narrow
view of Stripe the service needs, so tests can count and fake Stripe calls.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import CurrentUser

from .models import CheckoutSession, WebhookEvent


@runtime_checkable
class IPaymentGateway(Protocol):
    """Stripe operations used by the billing service."""

    def create_customer(self, email: Optional[str], uid: str) -> str:
        """
        Create a Stripe customer tagged with the user's uid.

        Returns:
            The new customer ID
        """
        ...

    def create_checkout_session(
        self,
        customer_id: str,
        price_id: str,
        uid: str,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """Create a subscription-mode hosted checkout session."""
        ...

    def create_portal_session(self, customer_id: str, return_url: str) -> str:
        """
        Create a hosted billing portal session.

        Returns:
            The portal URL
        """
        ...

    def construct_event(self, payload: bytes, signature: str, secret: str) -> WebhookEvent:
        """
        Verify a webhook payload against its signature.

        Raises:
            WebhookVerificationError: If the signature or payload is invalid
        """
        ...

    def retrieve_checkout_session(self, session_id: str) -> dict[str, Any]:
        """Retrieve a checkout session with line items, prices and products expanded."""
        ...

    def retrieve_product(self, product_id: str) -> dict[str, Any]:
        """Retrieve a product."""
        ...


@runtime_checkable
class IBillingService(Protocol):
    """
    Interface for subscription billing operations.

    Stripe failures from checkout and portal creation propagate unchanged.
    """

    async def ensure_billing_customer(self, user: CurrentUser) -> str:
        """
        Get the user's Stripe customer ID, creating and storing one if needed.

        Safe to retry: once stored, the ID is reused and never overwritten.
        """
        ...

    async def create_checkout_session(self, user: CurrentUser, price_id: str) -> CheckoutSession:
        """
        Start a subscription checkout for a price.

        Raises:
            MissingPriceError: If price_id is empty
        """
        ...

    async def create_portal_session(self, user: CurrentUser) -> str:
        """
        Open the customer portal.

        Returns:
            The portal URL
        """
        ...

    async def handle_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookEvent:
        """
        Verify and apply a Stripe webhook.

        Raises:
            WebhookVerificationError: If the webhook cannot be verified
            WebhookProcessingError: If applying the event fails
        """
        ...
