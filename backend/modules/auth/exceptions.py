"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)

from .models import TokenRejectionReason


class InvalidTokenError(AuthenticationError):
    """Raised when a session token fails verification."""

    def __init__(
        self,
        reason: TokenRejectionReason = TokenRejectionReason.MALFORMED,
        message: str = "Invalid authentication token",
    ):
        super().__init__(message, code="INVALID_TOKEN", details={"reason": reason.value})
        self.reason = reason


class ExpiredTokenError(InvalidTokenError):
    """Raised when a session token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(TokenRejectionReason.EXPIRED, message)
        self.code = "TOKEN_EXPIRED"


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Not authorized, no token"):
        super().__init__(message, code="MISSING_TOKEN")


class MalformedTokenError(AuthenticationError):
    """Raised when the authorization header has no token after the scheme."""

    def __init__(self, message: str = "Not authorized, malformed token"):
        super().__init__(message, code="MALFORMED_TOKEN")


class UserNotFoundError(AuthenticationError):
    """Raised when the authenticated user doesn't exist in the database."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised for an unknown email or a wrong password. Same message for both."""

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


class EmailNotVerifiedError(AuthenticationError):
    """Raised when correct credentials belong to an unverified account."""

    def __init__(self):
        super().__init__(
            "Please verify your email before logging in.",
            code="EMAIL_NOT_VERIFIED",
        )


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self):
        super().__init__("Email already registered", code="EMAIL_EXISTS")


class InvalidVerificationTokenError(ValidationError):
    """Raised when a verification token matches no pending account."""

    def __init__(self):
        super().__init__("Invalid or expired token", code="INVALID_OR_EXPIRED_TOKEN")


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            "Insufficient permissions",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )


class NotificationError(ExternalServiceError):
    """Raised when the verification email could not be delivered."""

    def __init__(self, message: str):
        super().__init__(message, service="mail", code="NOTIFICATION_FAILED")


class AccountNotFoundError(NotFoundError):
    """Raised when an operation targets a user ID that does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
