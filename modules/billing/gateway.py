"""
Stripe payment gateway.

Thin adapter over stripe.StripeClient. Stripe API errors are not caught
here; only webhook verification failures are translated. Stripe objects
are handed back as plain dicts.
"""

from typing import Any, Optional

import stripe

from .interfaces import IPaymentGateway
from .models import CheckoutSession, WebhookEvent
from .exceptions import WebhookVerificationError


def to_plain(value: Any) -> Any:
    """Recursively convert Stripe objects into plain dicts and lists."""
    if isinstance(value, stripe.StripeObject):
        value = value.to_dict()
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value


class StripeGateway(IPaymentGateway):
    """IPaymentGateway backed by the Stripe API."""

    def __init__(self, client: stripe.StripeClient):
        self._client = client

    def create_customer(self, email: Optional[str], uid: str) -> str:
        params: dict[str, Any] = {"metadata": {"uid": uid}}
        if email:
            params["email"] = email
        customer = self._client.v1.customers.create(params=params)
        return customer.id

    def create_checkout_session(
        self,
        customer_id: str,
        price_id: str,
        uid: str,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        session = self._client.v1.checkout.sessions.create(params={
            "mode": "subscription",
            "payment_method_types": ["card"],
            "customer": customer_id,
            "success_url": success_url,
            "cancel_url": cancel_url,
            "line_items": [{"price": price_id, "quantity": 1}],
            "metadata": {"uid": uid},
        })
        return CheckoutSession(session_id=session.id, url=session.url)

    def create_portal_session(self, customer_id: str, return_url: str) -> str:
        portal = self._client.v1.billing_portal.sessions.create(params={
            "customer": customer_id,
            "return_url": return_url,
        })
        return portal.url

    def construct_event(self, payload: bytes, signature: str, secret: str) -> WebhookEvent:
        try:
            event = self._client.construct_event(payload, signature, secret)
        except (stripe.SignatureVerificationError, ValueError) as e:
            raise WebhookVerificationError(str(e))
        return WebhookEvent(id=event.id, type=event.type, data=to_plain(event.data.object))

    def retrieve_checkout_session(self, session_id: str) -> dict[str, Any]:
        session = self._client.v1.checkout.sessions.retrieve(
            session_id,
            params={"expand": ["line_items.data.price.product"]},
        )
        return to_plain(session)

    def retrieve_product(self, product_id: str) -> dict[str, Any]:
        return to_plain(self._client.v1.products.retrieve(product_id))
