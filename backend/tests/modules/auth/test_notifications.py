"""
Tests for verification email delivery.
"""

import json

import httpx
import pytest

from modules.auth.exceptions import NotificationError
from modules.auth.notifications import (
    VerificationMailer,
    build_verification_url,
    render_verification_email,
)
from shared.config import Settings


def mail_settings(**overrides) -> Settings:
    values = {
        "jwt_secret": "s",
        "frontend_url": "https://app.dewhitt.test",
        "mail_api_url": "https://mail.test/emails",
        "mail_api_key": "key-123",
    }
    values.update(overrides)
    return Settings(**values)


class TestVerificationUrl:
    def test_builds_frontend_link(self):
        assert (
            build_verification_url("https://app.dewhitt.test/", "abc")
            == "https://app.dewhitt.test/verify-email?token=abc"
        )

    def test_email_contains_link_and_name(self):
        html = render_verification_email("Alice", "https://x/verify-email?token=abc")
        assert "Alice" in html
        assert 'href="https://x/verify-email?token=abc"' in html


class TestVerificationMailer:
    @pytest.mark.asyncio
    async def test_posts_message(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"id": "msg_1"})

        mailer = VerificationMailer(mail_settings(), transport=httpx.MockTransport(handler))
        await mailer.send_verification("alice@example.com", "Alice", "abc")

        assert len(requests) == 1
        request = requests[0]
        assert str(request.url) == "https://mail.test/emails"
        assert request.headers["Authorization"] == "Bearer key-123"
        body = json.loads(request.content)
        assert body["to"] == ["alice@example.com"]
        assert "verify-email?token=abc" in body["html"]

    @pytest.mark.asyncio
    async def test_error_status_raises_notification_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(503))
        mailer = VerificationMailer(mail_settings(), transport=transport)
        with pytest.raises(NotificationError):
            await mailer.send_verification("alice@example.com", "Alice", "abc")

    @pytest.mark.asyncio
    async def test_connection_error_raises_notification_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        mailer = VerificationMailer(mail_settings(), transport=httpx.MockTransport(handler))
        with pytest.raises(NotificationError):
            await mailer.send_verification("alice@example.com", "Alice", "abc")

    @pytest.mark.asyncio
    async def test_skips_when_not_configured(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        mailer = VerificationMailer(
            mail_settings(mail_api_url="", mail_api_key=""),
            transport=httpx.MockTransport(handler),
        )
        await mailer.send_verification("alice@example.com", "Alice", "abc")
