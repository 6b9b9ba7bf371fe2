"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and future extraction to a microservice.
"""

from datetime import datetime
from typing import Any, Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser, PlanTier, SubscriptionStatus, UserRole

from .models import (
    LoginResponse,
    ProfileMetrics,
    ProfileUpdate,
    RegisterRequest,
    TokenClaims,
    UserProfile,
    UserRecord,
)


@runtime_checkable
class IUserRepository(Protocol):
    """Storage contract for user records (the credential store)."""

    def get_by_id(self, user_id: str) -> Optional[UserRecord]: ...

    def get_by_email(self, email: str) -> Optional[UserRecord]: ...

    def get_by_customer_id(self, customer_id: str) -> Optional[UserRecord]: ...

    def list_by_role(self, role: UserRole) -> list[UserRecord]: ...

    def create(self, data: dict[str, Any]) -> UserRecord: ...

    def consume_verification_token(self, token: str) -> Optional[UserRecord]: ...

    def update(self, user_id: str, fields: dict[str, Any]) -> Optional[UserRecord]: ...

    def update_billing(
        self,
        user_id: str,
        subscription_status: Optional[SubscriptionStatus] = None,
        plan_tier: Optional[PlanTier] = None,
        stripe_customer_id: Optional[str] = None,
        current_period_end: Optional[datetime] = None,
    ) -> Optional[UserRecord]: ...

    def delete(self, user_id: str) -> bool: ...


@runtime_checkable
class IVerificationNotifier(Protocol):
    """Out-of-band delivery of verification links."""

    async def send_verification(self, email: str, first_name: str, token: str) -> None:
        """
        Send a verification link.

        Raises:
            NotificationError: If delivery failed
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> UserRecord:
        """
        Create an unverified account and send its verification link.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def confirm_email(self, token: str) -> UserRecord:
        """
        Consume a verification token.

        Raises:
            InvalidVerificationTokenError: If no account holds the token
        """
        ...

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Exchange credentials for a session token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
            EmailNotVerifiedError: Correct credentials, unverified account
        """
        ...

    async def validate_token(self, token: str) -> TokenClaims:
        """
        Validate a session token and return its claims.

        Raises:
            MissingTokenError: If token is empty
            InvalidTokenError: If token is malformed, forged or expired
        """
        ...

    async def resolve_user(self, token: str) -> AuthenticatedUser:
        """
        Validate a session token and load the current user it names.

        Raises:
            InvalidTokenError: If token is malformed, forged or expired
            UserNotFoundError: If the user was deleted after issuance
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        ...

    async def update_profile(self, user_id: str, update: ProfileUpdate) -> UserProfile:
        ...

    async def save_profile_metrics(self, user_id: str, metrics: ProfileMetrics) -> UserProfile:
        ...

    async def list_members(self) -> list[UserProfile]:
        ...

    async def delete_user(self, user_id: str) -> None:
        ...
