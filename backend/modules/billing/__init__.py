"""
Billing module.

Stripe subscription checkout and webhook handling.

Public API:
- BillingService: checkout sessions and webhook event application
- CheckoutSession: Stripe session ID and redirect URL
- Billing exceptions: WebhookVerificationError, etc.
"""

from .models import CheckoutSession, WebhookResult, map_stripe_status, tier_for_status
from .exceptions import (
    BillingNotConfiguredError,
    PaymentProviderError,
    WebhookVerificationError,
)

__all__ = [
    # Models
    "CheckoutSession",
    "WebhookResult",
    "map_stripe_status",
    "tier_for_status",
    # Exceptions
    "BillingNotConfiguredError",
    "PaymentProviderError",
    "WebhookVerificationError",
]
