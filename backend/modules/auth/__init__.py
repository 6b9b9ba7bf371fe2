"""
Authentication module.

Handles registration, email verification, login, session tokens and
user profile management.

Public API:
- IAuthService: Interface for auth operations
- TokenCodec: Issues and verifies session tokens
- PasswordHasher: bcrypt password hashing
- UserRecord / UserProfile / UserSummary: User models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, IUserRepository, IVerificationNotifier
from .models import (
    UserRecord,
    UserProfile,
    UserSummary,
    TokenClaims,
    TokenRejectionReason,
)
from .tokens import TokenCodec
from .passwords import PasswordHasher
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    MalformedTokenError,
    UserNotFoundError,
    AccountNotFoundError,
    InvalidCredentialsError,
    EmailNotVerifiedError,
    EmailAlreadyRegisteredError,
    InvalidVerificationTokenError,
    InsufficientPermissionsError,
    NotificationError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    "IVerificationNotifier",
    # Models
    "UserRecord",
    "UserProfile",
    "UserSummary",
    "TokenClaims",
    "TokenRejectionReason",
    # Components
    "TokenCodec",
    "PasswordHasher",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "MalformedTokenError",
    "UserNotFoundError",
    "AccountNotFoundError",
    "InvalidCredentialsError",
    "EmailNotVerifiedError",
    "EmailAlreadyRegisteredError",
    "InvalidVerificationTokenError",
    "InsufficientPermissionsError",
    "NotificationError",
]
