"""
Billing API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from api.dependencies import get_billing_service
from api.middleware.auth import RequireAuth
from shared.models import AuthenticatedUser

from .models import CheckoutSession, WebhookResult
from .service import BillingService

router = APIRouter()


@router.post("/checkout", response_model=CheckoutSession)
async def create_checkout(
    user: AuthenticatedUser = RequireAuth,
    service: BillingService = Depends(get_billing_service),
) -> CheckoutSession:
    """
    Start a Stripe checkout for the premium subscription.

    Returns the session ID and the URL to redirect the browser to.
    """
    return await service.create_checkout_session(user)


@router.post("/webhook", response_model=WebhookResult)
async def stripe_webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(None, alias="Stripe-Signature"),
    service: BillingService = Depends(get_billing_service),
) -> WebhookResult:
    """
    Receive Stripe events.

    Authenticated by the Stripe-Signature header, not by a session token.
    """
    payload = await request.body()
    return await service.handle_webhook(payload, stripe_signature)
