"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
The application under test is wired to in-memory fakes; no test touches
Supabase, Stripe or a mail API.
"""

import os

# Test JWT secret (only for testing). Set before the app reads its settings.
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
os.environ.setdefault("JWT_SECRET", TEST_JWT_SECRET)

from datetime import datetime, timedelta, timezone

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_billing_service,
    get_goal_service,
    get_log_service,
    get_project_service,
    reset_container,
)
from modules.auth.passwords import PasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenCodec
from modules.billing.service import BillingService
from modules.goals.service import GoalService
from modules.logs.service import LogService
from modules.projects.service import ProjectService
from shared.config import Settings, get_settings
from shared.models import UserRole
from tests.fakes import (
    InMemoryGoalRepository,
    InMemoryLogRepository,
    InMemoryProjectRepository,
    InMemoryUserRepository,
    RecordingNotifier,
)

TEST_PASSWORD = "secret1"


def create_test_token(
    user_id: str = "test-user-123",
    role: str = "Member",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a session token the way the app signs them.

    Args:
        user_id: User ID to include in the token
        role: Role snapshot to include in the token
        expired: If True, creates an expired token
        secret: Signing secret; pass another value to forge a bad signature

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "role": role,
        "iat": int((now - timedelta(hours=2)).timestamp()) if expired else int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the settings cache and service container around each test."""
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        password_hash_rounds=4,
        frontend_url="http://localhost:5173",
        stripe_secret_key="sk_test_123",
        stripe_webhook_secret="whsec_test_123",
        stripe_price_id="price_123",
    )


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def codec(settings: Settings) -> TokenCodec:
    return TokenCodec.from_settings(settings)


@pytest.fixture
def auth_service(users, hasher, codec, notifier) -> AuthService:
    return AuthService(users=users, hasher=hasher, codec=codec, notifier=notifier)


@pytest.fixture
def goal_repository() -> InMemoryGoalRepository:
    return InMemoryGoalRepository()


@pytest.fixture
def log_repository() -> InMemoryLogRepository:
    return InMemoryLogRepository()


@pytest.fixture
def project_repository() -> InMemoryProjectRepository:
    return InMemoryProjectRepository()


@pytest.fixture
def project_service(project_repository, users) -> ProjectService:
    return ProjectService(project_repository, users=users)


@pytest.fixture
def billing_service(settings, users) -> BillingService:
    return BillingService(settings, users)


@pytest.fixture
def app(auth_service, goal_repository, log_repository, project_service, billing_service):
    """Application with every service dependency pointed at in-memory fakes."""
    application = create_app()
    application.dependency_overrides[get_auth_service] = lambda: auth_service
    application.dependency_overrides[get_goal_service] = lambda: GoalService(goal_repository)
    application.dependency_overrides[get_log_service] = lambda: LogService(log_repository)
    application.dependency_overrides[get_project_service] = lambda: project_service
    application.dependency_overrides[get_billing_service] = lambda: billing_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def make_user(users: InMemoryUserRepository, hasher: PasswordHasher):
    """Factory for verified accounts with a known password."""
    def _make(
        email: str = "alice@example.com",
        role: UserRole = UserRole.MEMBER,
        is_verified: bool = True,
        **fields,
    ):
        return users.add(
            email=email,
            password_hash=hasher.hash(TEST_PASSWORD),
            first_name=fields.pop("first_name", "Alice"),
            last_name=fields.pop("last_name", "Smith"),
            role=role,
            is_verified=is_verified,
            **fields,
        )
    return _make


@pytest.fixture
def member(make_user):
    return make_user()


@pytest.fixture
def admin(make_user):
    return make_user(email="coach@example.com", role=UserRole.ADMIN, first_name="Dee")


@pytest.fixture
def member_headers(member, codec) -> dict[str, str]:
    return bearer(codec.issue(member.id, member.role))


@pytest.fixture
def admin_headers(admin, codec) -> dict[str, str]:
    return bearer(codec.issue(admin.id, admin.role))
