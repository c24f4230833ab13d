"""
Billing service implementation.

Provisions Stripe customers lazily, starts hosted checkout and portal
sessions, and mirrors subscription state from Stripe webhooks into the
user's profile document.
"""

from typing import Any, Optional
import logging
import time

from shared.models import CurrentUser
from modules.users.interfaces import IProfileRepository

from .interfaces import IBillingService, IPaymentGateway
from .models import CheckoutSession, SubscriptionTier, WebhookEvent
from .exceptions import MissingPriceError, WebhookProcessingError, WebhookVerificationError

logger = logging.getLogger(__name__)

SUBSCRIPTION_EVENTS = (
    "customer.subscription.created",
    "customer.subscription.updated",
    "customer.subscription.deleted",
)


def normalize_tier_name(value: Optional[str]) -> Optional[str]:
    """
    Map a Stripe product/price label onto a tier name.

    Unrecognised labels are returned unchanged.
    """
    if not value:
        return None
    lowered = value.lower()
    if SubscriptionTier.ENTERPRISE.value in lowered:
        return SubscriptionTier.ENTERPRISE.value
    if SubscriptionTier.PRO.value in lowered:
        return SubscriptionTier.PRO.value
    if any(word in lowered for word in ("basic", "starter", "personal")):
        return SubscriptionTier.BASIC.value
    return value


def _tier_for(price: dict[str, Any], product: dict[str, Any]) -> Optional[str]:
    """Tier from product metadata, then price nickname, then product name."""
    metadata = product.get("metadata") or {}
    return normalize_tier_name(
        metadata.get("tier") or price.get("nickname") or product.get("name")
    )


def _now_millis() -> int:
    return int(time.time() * 1000)


class BillingService(IBillingService):
    """
    Subscription billing on Stripe.

    The new customer ID is stored before any session is created, without a
    transaction: if session creation then fails, the stored ID is simply
    reused on the next attempt.
    """

    def __init__(
        self,
        gateway: IPaymentGateway,
        profiles: IProfileRepository,
        app_url: str,
        webhook_secret: str = "",
    ):
        self._gateway = gateway
        self._profiles = profiles
        self._app_url = app_url.rstrip("/")
        self._webhook_secret = webhook_secret

    async def ensure_billing_customer(self, user: CurrentUser) -> str:
        if user.stripe_customer_id:
            return user.stripe_customer_id

        customer_id = self._gateway.create_customer(email=user.email, uid=user.uid)
        self._profiles.merge(user.uid, {"stripeCustomerId": customer_id})
        logger.info("Created Stripe customer %s for user %s", customer_id, user.uid)
        return customer_id

    async def create_checkout_session(self, user: CurrentUser, price_id: str) -> CheckoutSession:
        if not price_id:
            raise MissingPriceError()

        customer_id = await self.ensure_billing_customer(user)
        return self._gateway.create_checkout_session(
            customer_id=customer_id,
            price_id=price_id,
            uid=user.uid,
            success_url=f"{self._app_url}/app?session_id={{CHECKOUT_SESSION_ID}}",
            cancel_url=f"{self._app_url}/app",
        )

    async def create_portal_session(self, user: CurrentUser) -> str:
        customer_id = await self.ensure_billing_customer(user)
        return self._gateway.create_portal_session(
            customer_id=customer_id,
            return_url=f"{self._app_url}/app",
        )

    async def handle_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookEvent:
        if not signature or not self._webhook_secret:
            raise WebhookVerificationError("Missing signature")

        event = self._gateway.construct_event(payload, signature, self._webhook_secret)
        logger.info("Stripe webhook received: %s", event.type)

        try:
            if event.type == "checkout.session.completed":
                self._apply_checkout_completed(event.data)
            elif event.type in SUBSCRIPTION_EVENTS:
                self._apply_subscription_change(event.data)
        except Exception as e:
            logger.exception("Failed to apply Stripe event %s", event.type)
            raise WebhookProcessingError(event.type, str(e)) from e

        return event

    # -------------------------------------------------------------------------
    # Webhook event handlers
    # -------------------------------------------------------------------------

    def _apply_checkout_completed(self, session: dict[str, Any]) -> None:
        """Record the subscription a completed checkout created."""
        metadata = session.get("metadata") or {}
        uid = session.get("client_reference_id") or metadata.get("uid")

        full_session = self._gateway.retrieve_checkout_session(session["id"])
        line_items = (full_session.get("line_items") or {}).get("data") or []
        price = (line_items[0].get("price") if line_items else None) or {}
        product = price.get("product")
        if not isinstance(product, dict):
            product = {}

        subscription_id = full_session.get("subscription")
        if uid:
            self._profiles.merge(uid, {
                "stripeCustomerId": session.get("customer"),
                "subscriptionId": subscription_id,
                "priceId": price.get("id"),
                "subscriptionTier": _tier_for(price, product),
                "subscriptionStatus": "active" if subscription_id else "incomplete",
                "updatedAt": _now_millis(),
            })

    def _apply_subscription_change(self, subscription: dict[str, Any]) -> None:
        """Mirror a subscription's price, tier and status onto its owner."""
        customer_id = subscription.get("customer")
        items = (subscription.get("items") or {}).get("data") or []
        item = items[0] if items else {}
        price = item.get("price") or {}

        tier = None
        product_ref = price.get("product")
        if product_ref:
            product_id = product_ref if isinstance(product_ref, str) else product_ref.get("id")
            tier = _tier_for(price, self._gateway.retrieve_product(product_id))

        uid = self._profiles.find_uid_by_customer(customer_id) if customer_id else None
        if uid:
            self._profiles.merge(uid, {
                "priceId": price.get("id"),
                "subscriptionTier": tier,
                "subscriptionStatus": subscription.get("status"),
                "currentPeriodEnd": (
                    subscription.get("current_period_end") or item.get("current_period_end")
                ),
                "updatedAt": _now_millis(),
            })
