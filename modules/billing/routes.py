"""
Stripe billing API endpoints.

Checkout and portal requests come from plain HTML forms and answer with a
303 redirect to the hosted Stripe page.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Header, Request
from fastapi.responses import RedirectResponse

from api.dependencies import get_app_settings, get_billing_service
from api.middleware.auth import get_current_user
from shared.config import Settings
from shared.models import CurrentUser

from .interfaces import IBillingService
from .models import PricingConfig, WebhookAck

router = APIRouter()


@router.post("/checkout", status_code=303, response_class=RedirectResponse)
async def create_checkout(
    price_id: str = Form(default="", alias="priceId"),
    user: CurrentUser = Depends(get_current_user),
    billing: IBillingService = Depends(get_billing_service),
):
    """Start a subscription checkout and redirect to Stripe."""
    session = await billing.create_checkout_session(user, price_id)
    return RedirectResponse(session.url, status_code=303)


@router.post("/portal", status_code=303, response_class=RedirectResponse)
async def open_portal(
    user: CurrentUser = Depends(get_current_user),
    billing: IBillingService = Depends(get_billing_service),
):
    """Redirect to the Stripe customer portal."""
    url = await billing.create_portal_session(user)
    return RedirectResponse(url, status_code=303)


@router.get("/config", response_model=PricingConfig)
async def get_pricing_config(
    settings: Settings = Depends(get_app_settings),
) -> PricingConfig:
    """Public identifiers for the embedded pricing table."""
    return PricingConfig(
        pricing_table_id=settings.stripe_pricing_table_id,
        publishable_key=settings.stripe_publishable_key,
    )


@router.post("/webhook", response_model=WebhookAck)
async def stripe_webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(default=None, alias="stripe-signature"),
    billing: IBillingService = Depends(get_billing_service),
) -> WebhookAck:
    """
    Receive Stripe events.

    The raw body is passed through untouched for signature verification.
    """
    payload = await request.body()
    await billing.handle_webhook(payload, stripe_signature)
    return WebhookAck()
