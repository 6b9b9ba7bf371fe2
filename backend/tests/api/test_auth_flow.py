"""
End-to-end account flow: register, verify, log in, use the session.
"""

import pytest

from tests.conftest import TEST_PASSWORD, bearer

ALICE = {
    "email": "alice@example.com",
    "password": "secret1",
    "first_name": "Alice",
    "last_name": "Smith",
}


class TestRegister:
    def test_register_returns_check_email_message(self, client, notifier):
        response = client.post("/api/auth/register", json=ALICE)
        assert response.status_code == 201
        data = response.json()
        assert "check your email" in data["message"]
        assert data["user"]["email"] == "alice@example.com"
        assert data["user"]["role"] == "Member"
        assert "token" not in data
        assert len(notifier.sent) == 1

    def test_register_never_returns_secrets(self, client):
        body = client.post("/api/auth/register", json=ALICE).text
        assert "password" not in body
        assert "verification_token" not in body

    def test_duplicate_email(self, client):
        client.post("/api/auth/register", json=ALICE)
        response = client.post("/api/auth/register", json=ALICE)
        assert response.status_code == 409
        assert response.json()["detail"] == "Email already registered"

    @pytest.mark.parametrize(
        "field,value",
        [("password", "12345"), ("email", "not-an-email"), ("first_name", "")],
    )
    def test_invalid_input(self, client, field, value):
        response = client.post("/api/auth/register", json={**ALICE, field: value})
        assert response.status_code == 400
        assert response.json()["error"] == "Validation Error"

    def test_legacy_path(self, client):
        assert client.post("/register", json=ALICE).status_code == 201


class TestVerifyEmail:
    def test_verify_then_reuse(self, client, notifier):
        client.post("/api/auth/register", json=ALICE)
        token = notifier.token_for("alice@example.com")

        response = client.post("/api/auth/verify-email", json={"token": token})
        assert response.status_code == 200
        assert response.json()["message"] == "Email verified successfully! You can now log in."

        reused = client.post("/api/auth/verify-email", json={"token": token})
        assert reused.status_code == 400
        assert reused.json()["detail"] == "Invalid or expired token"

    def test_unknown_token(self, client):
        response = client.post("/api/auth/verify-email", json={"token": "nope"})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_OR_EXPIRED_TOKEN"


class TestLogin:
    def test_unverified_cannot_log_in(self, client):
        client.post("/api/auth/register", json=ALICE)
        response = client.post(
            "/api/auth/login", json={"email": ALICE["email"], "password": ALICE["password"]}
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Please verify your email before logging in."

    def test_wrong_password(self, client, member):
        response = client.post(
            "/api/auth/login", json={"email": "alice@example.com", "password": "wrong-pass"}
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_unknown_email(self, client):
        response = client.post(
            "/api/auth/login", json={"email": "nobody@example.com", "password": "whatever"}
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_legacy_path(self, client, member):
        response = client.post(
            "/login", json={"email": "alice@example.com", "password": TEST_PASSWORD}
        )
        assert response.status_code == 200


class TestFullJourney:
    def test_register_verify_login_profile(self, client, notifier):
        """A new user registers, verifies, logs in and reads their profile."""
        assert client.post("/api/auth/register", json=ALICE).status_code == 201
        token = notifier.token_for("alice@example.com")
        assert client.post("/api/auth/verify-email", json={"token": token}).status_code == 200

        login = client.post(
            "/api/auth/login", json={"email": ALICE["email"], "password": ALICE["password"]}
        )
        assert login.status_code == 200
        session = login.json()
        assert session["token_type"] == "bearer"
        assert session["user"]["name"] == "Alice Smith"

        profile = client.get("/api/user/profile", headers=bearer(session["token"]))
        assert profile.status_code == 200
        user = profile.json()["user"]
        assert user["email"] == "alice@example.com"
        assert user["is_verified"] is True
        assert "password_hash" not in user
        assert "verification_token" not in user
