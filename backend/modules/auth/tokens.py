"""
Session token codec.

Issues and verifies compact HS256-signed JWTs carrying the user ID and a
snapshot of the user's role. Verification is stateless: there is no
server-side session store and no revocation list, so tokens stay short-lived.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings
from shared.models import UserRole

from .exceptions import ExpiredTokenError, InvalidTokenError
from .models import TokenClaims, TokenRejectionReason

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class TokenCodec:
    """Produces and verifies signed, time-limited bearer tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
    ):
        if not secret:
            raise RuntimeError("Token signing secret is not configured")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expire_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenCodec":
        return cls(
            secret=settings.require_signing_secret(),
            algorithm=settings.jwt_algorithm,
            expire_minutes=settings.jwt_expire_minutes,
        )

    @property
    def lifetime_seconds(self) -> int:
        return int(self._lifetime.total_seconds())

    def issue(
        self,
        subject_id: str,
        role: UserRole,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Issue a session token.

        Args:
            subject_id: User ID the token authenticates
            role: Role snapshot embedded in the token
            now: Issuance time (defaults to the current UTC time)

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(subject_id),
            "role": UserRole(role).value,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a session token's signature and expiry.

        Args:
            token: Encoded JWT string

        Returns:
            TokenClaims with subject ID and role

        Raises:
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the token is malformed or the signature
                does not match; ``reason`` tells which
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidSignatureError:
            raise InvalidTokenError(TokenRejectionReason.BAD_SIGNATURE)
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected malformed token: %s", e)
            raise InvalidTokenError(TokenRejectionReason.MALFORMED)

        try:
            return TokenClaims(**payload)
        except PydanticValidationError:
            raise InvalidTokenError(TokenRejectionReason.MALFORMED)
