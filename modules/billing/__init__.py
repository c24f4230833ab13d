"""
Billing module.

Handles Stripe subscriptions: customer provisioning, hosted checkout and
portal sessions, and webhook-driven subscription state.

Public API:
- IBillingService: Interface for billing operations
- IPaymentGateway: Interface over the Stripe API
- CheckoutSession, WebhookEvent: Billing data models
- Billing exceptions: MissingPriceError, WebhookVerificationError, etc.
"""

from .interfaces import IBillingService, IPaymentGateway
from .models import (
    SubscriptionTier,
    CheckoutSession,
    WebhookEvent,
    WebhookAck,
    PricingConfig,
)
from .exceptions import (
    BillingError,
    MissingPriceError,
    WebhookVerificationError,
    WebhookProcessingError,
)

__all__ = [
    # Interfaces
    "IBillingService",
    "IPaymentGateway",
    # Models
    "SubscriptionTier",
    "CheckoutSession",
    "WebhookEvent",
    "WebhookAck",
    "PricingConfig",
    # Exceptions
    "BillingError",
    "MissingPriceError",
    "WebhookVerificationError",
    "WebhookProcessingError",
]
