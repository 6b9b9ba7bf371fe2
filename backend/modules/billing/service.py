"""
Billing service implementation.

Creates Stripe subscription checkout sessions and applies Stripe webhook
events to the subscription fields of user accounts.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import stripe

from modules.auth.interfaces import IUserRepository
from modules.auth.models import UserRecord
from shared.config import Settings
from shared.models import AuthenticatedUser, PlanTier, SubscriptionStatus

from .exceptions import (
    BillingNotConfiguredError,
    PaymentProviderError,
    WebhookVerificationError,
)
from .models import CheckoutSession, WebhookResult, map_stripe_status, tier_for_status

logger = logging.getLogger(__name__)


class BillingService:
    """
    Stripe subscription billing.

    Stripe is the source of truth for subscription state; webhook events
    are the only writer of a user's subscription fields.
    """

    def __init__(self, settings: Settings, users: IUserRepository):
        self._settings = settings
        self._users = users
        self._handlers: dict[str, Callable[[dict[str, Any]], bool]] = {
            "checkout.session.completed": self._on_checkout_completed,
            "customer.subscription.updated": self._on_subscription_updated,
            "customer.subscription.deleted": self._on_subscription_deleted,
            "invoice.payment_failed": self._on_payment_failed,
        }

    async def create_checkout_session(self, user: AuthenticatedUser) -> CheckoutSession:
        """
        Start a subscription checkout for the user.

        Raises:
            BillingNotConfiguredError: If the Stripe key or price is missing
            PaymentProviderError: If Stripe rejects the request
        """
        if not self._settings.stripe_secret_key:
            raise BillingNotConfiguredError("stripe_secret_key")
        if not self._settings.stripe_price_id:
            raise BillingNotConfiguredError("stripe_price_id")

        params: dict[str, Any] = {
            "mode": "subscription",
            "line_items": [{"price": self._settings.stripe_price_id, "quantity": 1}],
            "client_reference_id": user.id,
            "success_url": f"{self._settings.frontend_url}/dashboard?checkout=success",
            "cancel_url": f"{self._settings.frontend_url}/dashboard?checkout=canceled",
        }
        record = self._users.get_by_id(user.id)
        if record is not None and record.stripe_customer_id:
            params["customer"] = record.stripe_customer_id
        else:
            params["customer_email"] = user.email

        try:
            session = stripe.checkout.Session.create(
                api_key=self._settings.stripe_secret_key,
                **params,
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe checkout failed for user {user.id}: {e}")
            raise PaymentProviderError("Could not start checkout", str(e)) from e

        return CheckoutSession(session_id=session["id"], url=session["url"])

    async def handle_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookResult:
        """
        Verify and apply a Stripe webhook event.

        Raises:
            BillingNotConfiguredError: If no webhook secret is configured
            WebhookVerificationError: If the payload or signature is invalid
        """
        if not self._settings.stripe_webhook_secret:
            raise BillingNotConfiguredError("stripe_webhook_secret")
        if not signature:
            raise WebhookVerificationError()

        try:
            event = stripe.Webhook.construct_event(
                payload, signature, self._settings.stripe_webhook_secret
            )
        except (ValueError, stripe.SignatureVerificationError) as e:
            logger.warning(f"Rejected Stripe webhook: {e}")
            raise WebhookVerificationError() from e

        event_type = event["type"]
        handler = self._handlers.get(event_type)
        if handler is None:
            logger.debug(f"Ignoring Stripe event {event_type}")
            return WebhookResult(event_type=event_type, handled=False)

        handled = handler(event["data"]["object"])
        return WebhookResult(event_type=event_type, handled=handled)

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    def _on_checkout_completed(self, session: dict[str, Any]) -> bool:
        user_id = session.get("client_reference_id")
        if not user_id:
            logger.warning("Checkout session without client_reference_id")
            return False

        updated = self._users.update_billing(
            user_id,
            subscription_status=SubscriptionStatus.ACTIVE,
            plan_tier=PlanTier.PREMIUM,
            stripe_customer_id=session.get("customer"),
        )
        if updated is None:
            logger.warning(f"Checkout completed for unknown user {user_id}")
            return False
        logger.info(f"User {user_id} upgraded to premium")
        return True

    def _on_subscription_updated(self, subscription: dict[str, Any]) -> bool:
        user = self._user_for_customer(subscription.get("customer"))
        if user is None:
            return False

        status = map_stripe_status(subscription.get("status"))
        period_end = subscription.get("current_period_end")
        self._users.update_billing(
            user.id,
            subscription_status=status,
            plan_tier=tier_for_status(status),
            current_period_end=(
                datetime.fromtimestamp(period_end, tz=timezone.utc) if period_end else None
            ),
        )
        return True

    def _on_subscription_deleted(self, subscription: dict[str, Any]) -> bool:
        user = self._user_for_customer(subscription.get("customer"))
        if user is None:
            return False

        self._users.update_billing(
            user.id,
            subscription_status=SubscriptionStatus.CANCELED,
            plan_tier=PlanTier.FREE,
        )
        logger.info(f"Subscription canceled for user {user.id}")
        return True

    def _on_payment_failed(self, invoice: dict[str, Any]) -> bool:
        user = self._user_for_customer(invoice.get("customer"))
        if user is None:
            return False

        self._users.update_billing(user.id, subscription_status=SubscriptionStatus.PAST_DUE)
        return True

    def _user_for_customer(self, customer_id: Optional[str]) -> Optional[UserRecord]:
        if not customer_id:
            return None
        user = self._users.get_by_customer_id(customer_id)
        if user is None:
            logger.warning(f"No user for Stripe customer {customer_id}")
        return user
