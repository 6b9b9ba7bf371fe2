"""
Billing module exceptions.

These exceptions are raised by the billing module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError, ValidationError


class BillingNotConfiguredError(ExternalServiceError):
    """Raised when Stripe keys or the price ID are missing."""

    def __init__(self, setting: str):
        super().__init__(
            "Billing is not configured",
            service="stripe",
            code="BILLING_NOT_CONFIGURED",
            details={"setting": setting},
        )


class PaymentProviderError(ExternalServiceError):
    """Raised when a Stripe API call fails."""

    def __init__(self, message: str, stripe_error: Optional[str] = None):
        super().__init__(
            message,
            service="stripe",
            code="PAYMENT_PROVIDER_ERROR",
            details={"stripe_error": stripe_error} if stripe_error else {},
        )


class WebhookVerificationError(ValidationError):
    """Raised when Stripe webhook signature verification fails."""

    def __init__(self):
        super().__init__(
            "Webhook signature verification failed",
            code="WEBHOOK_VERIFICATION_FAILED",
        )
