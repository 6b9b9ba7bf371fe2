"""
Verification email delivery.

Sends the verification link through a transactional mail HTTP API.
Delivery is best-effort: callers log failures and carry on.
"""

import logging
from urllib.parse import urlencode

import httpx

from shared.config import Settings

from .exceptions import NotificationError

logger = logging.getLogger(__name__)

SUBJECT = "Verify your email for DeWhitt"


def build_verification_url(frontend_url: str, token: str) -> str:
    return f"{frontend_url.rstrip('/')}/verify-email?{urlencode({'token': token})}"


def render_verification_email(first_name: str, verify_url: str) -> str:
    return (
        f"<h3>Hello {first_name},</h3>"
        "<p>Please verify your email by clicking the link below:</p>"
        f'<a href="{verify_url}">Verify Email</a>'
    )


class VerificationMailer:
    """Delivers verification links via the configured mail API."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._settings = settings
        self._transport = transport

    async def send_verification(self, email: str, first_name: str, token: str) -> None:
        verify_url = build_verification_url(self._settings.frontend_url, token)

        if not self._settings.mail_configured:
            logger.info("Mail API not configured, skipping verification email to %s", email)
            return

        message = {
            "from": self._settings.mail_from,
            "to": [email],
            "subject": SUBJECT,
            "html": render_verification_email(first_name, verify_url),
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._settings.mail_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._settings.mail_api_url,
                    json=message,
                    headers={"Authorization": f"Bearer {self._settings.mail_api_key}"},
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise NotificationError(f"Verification email to {email} failed: {e}") from e

        logger.info("Sent verification email to %s", email)
