"""
Authentication service implementation.

Orchestrates registration, email verification and login on top of the
user repository, the password hasher and the session token codec.
"""

import asyncio
import logging
import secrets
from typing import Optional

from shared.models import AuthenticatedUser, UserRole

from .exceptions import (
    AccountNotFoundError,
    EmailAlreadyRegisteredError,
    EmailNotVerifiedError,
    InvalidCredentialsError,
    InvalidTokenError,
    InvalidVerificationTokenError,
    MissingTokenError,
    NotificationError,
    UserNotFoundError,
)
from .interfaces import IAuthService, IUserRepository, IVerificationNotifier
from .models import (
    LoginResponse,
    ProfileMetrics,
    ProfileUpdate,
    RegisterRequest,
    TokenClaims,
    UserProfile,
    UserRecord,
)
from .passwords import PasswordHasher
from .tokens import TokenCodec

logger = logging.getLogger(__name__)

VERIFICATION_TOKEN_BYTES = 20


def generate_verification_token() -> str:
    """Random 160-bit hex token used once to prove control of an email."""
    return secrets.token_hex(VERIFICATION_TOKEN_BYTES)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Every collaborator is injected; the service holds no state of its own
    beyond them and is safe to share across requests.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: PasswordHasher,
        codec: TokenCodec,
        notifier: IVerificationNotifier,
    ):
        self._users = users
        self._hasher = hasher
        self._codec = codec
        self._notifier = notifier

    # -------------------------------------------------------------------------
    # Registration and verification
    # -------------------------------------------------------------------------

    async def register(self, request: RegisterRequest) -> UserRecord:
        """
        Create an unverified account and send its verification link.

        Mail delivery failures are logged and never fail the registration.
        """
        if self._users.get_by_email(request.email) is not None:
            raise EmailAlreadyRegisteredError()

        password_hash = await asyncio.to_thread(self._hasher.hash, request.password)
        token = generate_verification_token()

        user = self._users.create({
            "email": request.email,
            "password_hash": password_hash,
            "first_name": request.first_name,
            "last_name": request.last_name,
            "role": UserRole.MEMBER.value,
            "is_verified": False,
            "verification_token": token,
        })
        logger.info("Registered user %s", user.id)

        try:
            await self._notifier.send_verification(user.email, user.first_name, token)
        except NotificationError as e:
            logger.warning("Verification email for user %s not delivered: %s", user.id, e.message)

        return user

    async def confirm_email(self, token: str) -> UserRecord:
        """Consume a verification token exactly once."""
        if not token:
            raise InvalidVerificationTokenError()

        user = self._users.consume_verification_token(token)
        if user is None:
            raise InvalidVerificationTokenError()

        logger.info("Verified email for user %s", user.id)
        return user

    # -------------------------------------------------------------------------
    # Login and session tokens
    # -------------------------------------------------------------------------

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Exchange credentials for a session token.

        Unknown email and wrong password raise the same error. The password
        is checked before the verification flag, so an unverified account is
        only revealed to someone who knows its password.
        """
        user = self._users.get_by_email(email)
        if user is None:
            # Unknown emails cost the same bcrypt check as a wrong password
            await asyncio.to_thread(self._hasher.verify, password, self._hasher.dummy_hash)
            logger.info("Login rejected: unknown email")
            raise InvalidCredentialsError()

        matches = await asyncio.to_thread(self._hasher.verify, password, user.password_hash)
        if not matches:
            logger.info("Login rejected for user %s: wrong password", user.id)
            raise InvalidCredentialsError()

        if not user.is_verified:
            logger.info("Login rejected for user %s: email not verified", user.id)
            raise EmailNotVerifiedError()

        token = self._codec.issue(user.id, user.role)
        logger.info("Login: user %s", user.id)

        return LoginResponse(
            token=token,
            expires_in=self._codec.lifetime_seconds,
            user=user.to_summary(),
        )

    async def validate_token(self, token: str) -> TokenClaims:
        if not token:
            raise MissingTokenError()
        try:
            return self._codec.verify(token)
        except InvalidTokenError as e:
            logger.info("Rejected session token: %s", e.reason.value)
            raise

    async def resolve_user(self, token: str) -> AuthenticatedUser:
        claims = await self.validate_token(token)
        user = self._users.get_by_id(claims.sub)
        if user is None:
            raise UserNotFoundError(claims.sub)
        return user.to_authenticated()

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        user = self._users.get_by_id(user_id)
        return user.to_profile() if user else None

    async def update_profile(self, user_id: str, update: ProfileUpdate) -> UserProfile:
        """Apply only the fields present in ``update``; passwords are re-hashed."""
        fields = update.model_dump(exclude_unset=True, exclude_none=True)

        password = fields.pop("password", None)
        if password is not None:
            fields["password_hash"] = await asyncio.to_thread(self._hasher.hash, password)

        return self._apply(user_id, fields)

    async def save_profile_metrics(self, user_id: str, metrics: ProfileMetrics) -> UserProfile:
        return self._apply(user_id, metrics.model_dump(exclude_unset=True))

    async def list_members(self) -> list[UserProfile]:
        return [user.to_profile() for user in self._users.list_by_role(UserRole.MEMBER)]

    async def delete_user(self, user_id: str) -> None:
        if not self._users.delete(user_id):
            raise AccountNotFoundError(user_id)
        logger.info("Deleted user %s", user_id)

    def _apply(self, user_id: str, fields: dict) -> UserProfile:
        if fields:
            user = self._users.update(user_id, fields)
        else:
            user = self._users.get_by_id(user_id)
        if user is None:
            raise AccountNotFoundError(user_id)
        return user.to_profile()
