"""
Billing module data models.
"""

from typing import Optional

from pydantic import BaseModel, Field

from shared.models import PlanTier, SubscriptionStatus


# Stripe subscription status -> local subscription status
STRIPE_STATUS_MAP: dict[str, SubscriptionStatus] = {
    "active": SubscriptionStatus.ACTIVE,
    "trialing": SubscriptionStatus.ACTIVE,
    "past_due": SubscriptionStatus.PAST_DUE,
    "unpaid": SubscriptionStatus.PAST_DUE,
    "canceled": SubscriptionStatus.CANCELED,
    "incomplete_expired": SubscriptionStatus.CANCELED,
}

PREMIUM_STATUSES = frozenset({SubscriptionStatus.ACTIVE, SubscriptionStatus.PAST_DUE})


def map_stripe_status(stripe_status: Optional[str]) -> SubscriptionStatus:
    """Map a Stripe subscription status, defaulting to inactive."""
    return STRIPE_STATUS_MAP.get(stripe_status or "", SubscriptionStatus.INACTIVE)


def tier_for_status(status: SubscriptionStatus) -> PlanTier:
    return PlanTier.PREMIUM if status in PREMIUM_STATUSES else PlanTier.FREE


class CheckoutSession(BaseModel):
    """
    Stripe checkout session info.

    Returned when initiating a subscription purchase.
    """

    session_id: str = Field(..., description="Stripe checkout session ID")
    url: str = Field(..., description="Checkout URL to redirect user to")


class WebhookResult(BaseModel):
    """Acknowledgement returned to Stripe."""

    received: bool = True
    event_type: str
    handled: bool = Field(..., description="Whether the event changed any account")
