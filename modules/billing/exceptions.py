"""
Billing module exceptions.

These exceptions are raised by the billing module and mapped to HTTP
responses by the API error handlers. Stripe API errors from checkout and
portal creation are not wrapped.
"""

from typing import Optional

from shared.exceptions import StudyhallError, ValidationError


class BillingError(StudyhallError):
    """Base exception for billing-related errors."""

    pass


class MissingPriceError(ValidationError):
    """Raised when checkout is requested without a price."""

    def __init__(self):
        super().__init__("Missing priceId", code="MISSING_PRICE_ID")


class WebhookVerificationError(ValidationError):
    """Raised when a Stripe webhook cannot be verified."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            "Webhook signature verification failed",
            code="WEBHOOK_VERIFICATION_FAILED",
            details={"reason": reason} if reason else {},
        )


class WebhookProcessingError(BillingError):
    """Raised when a verified webhook event cannot be applied."""

    def __init__(self, event_type: str, reason: str):
        super().__init__(
            f"Webhook handler error: {reason}",
            code="WEBHOOK_PROCESSING_FAILED",
            details={"event_type": event_type},
        )
