"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field


class CurrentUser(BaseModel):
    """
    Represents the signed-in user for the current request.

    Rebuilt on every request from the verified session cookie: identity
    fields come from Firebase Auth, billing and subscription fields from
    the stored profile document.
    """

    uid: str = Field(..., description="Firebase user ID")
    email: Optional[str] = Field(None, description="User's email address")
    photo_url: Optional[str] = Field(None, description="Profile photo URL")

    # Billing linkage and subscription state (from users/{uid})
    stripe_customer_id: Optional[str] = Field(None, description="Stripe customer ID")
    subscription_tier: Optional[str] = Field(None, description="Subscription tier")
    subscription_status: Optional[str] = Field(None, description="Stripe subscription status")
    price_id: Optional[str] = Field(None, description="Subscribed Stripe price ID")
    current_period_end: Optional[int] = Field(None, description="Period end (epoch seconds)")
    completed_tasks: list[str] = Field(default_factory=list, description="Completed task IDs")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
