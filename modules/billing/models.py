"""
Billing module data models.

These models define the data structures used by the billing module
and exposed to other modules through the interface.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class SubscriptionTier(str, Enum):
    """Subscription tiers recognised in Stripe product names and metadata."""

    BASIC = "basic"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class CheckoutSession(BaseModel):
    """
    Stripe checkout session info.

    Returned when starting a subscription purchase.
    """

    session_id: str = Field(..., description="Stripe checkout session ID")
    url: str = Field(..., description="Checkout URL to redirect user to")


class WebhookEvent(BaseModel):
    """A verified Stripe webhook event."""

    id: Optional[str] = Field(None, description="Stripe event ID")
    type: str = Field(..., description="Event type, e.g. checkout.session.completed")
    data: dict[str, Any] = Field(default_factory=dict, description="The event's data.object")


class WebhookAck(BaseModel):
    """Acknowledgement returned to Stripe."""

    received: bool = True


class PricingConfig(BaseModel):
    """Public Stripe identifiers for embedding the hosted pricing table."""

    pricing_table_id: str = Field(..., description="Stripe pricing table ID")
    publishable_key: str = Field(..., description="Stripe publishable key")
