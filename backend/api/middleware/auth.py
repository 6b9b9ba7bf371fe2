"""
Bearer token authentication guard.

Extracts the session token from the Authorization header, validates it,
and resolves it to the current user record.
"""

import logging
from typing import Optional
from fastapi import Depends, HTTPException, Request, status

from modules.auth.exceptions import (
    InsufficientPermissionsError,
    InvalidTokenError,
    MalformedTokenError,
    MissingTokenError,
    UserNotFoundError,
)
from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser, UserRole

from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"

NO_TOKEN = "Not authorized, no token"
MALFORMED_TOKEN = "Not authorized, malformed token"
INVALID_TOKEN = "Not authorized, invalid or expired token"
USER_GONE = "Not authorized, user no longer exists"


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header value.

    The scheme name is matched case-insensitively.

    Raises:
        MissingTokenError: If there is no header or it is not a Bearer header
        MalformedTokenError: If the Bearer scheme has no single token after it
    """
    if not authorization or not authorization.strip():
        raise MissingTokenError()

    parts = authorization.strip().split(" ")
    if parts[0].lower() != BEARER_SCHEME:
        raise MissingTokenError()
    if len(parts) != 2 or not parts[1]:
        raise MalformedTokenError()
    return parts[1]


async def get_current_user(
    request: Request,
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. The resolved user
    is also stored on ``request.state.user``.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = RequireAuth):
            return {"user_id": user.id}
    """
    try:
        token = extract_bearer_token(request.headers.get("authorization"))
        user = await auth.resolve_user(token)
    except MissingTokenError:
        raise AuthError(NO_TOKEN)
    except MalformedTokenError:
        raise AuthError(MALFORMED_TOKEN)
    except InvalidTokenError:
        raise AuthError(INVALID_TOKEN)
    except UserNotFoundError as e:
        logger.info("Token for deleted user %s rejected", e.details.get("user_id"))
        raise AuthError(USER_GONE)

    request.state.user = user
    return user


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)


def require_role(role: UserRole):
    """
    Build a dependency that admits only users holding ``role``.

    Unauthenticated callers get 401 from the guard; authenticated callers
    with another role get 403.

    Usage:
        @router.get("/clients", dependencies=[RequireAdmin])
    """
    async def _require(user: AuthenticatedUser = RequireAuth) -> AuthenticatedUser:
        if user.role != role:
            raise InsufficientPermissionsError(role.value, user.role.value)
        return user

    return _require


RequireAdmin = Depends(require_role(UserRole.ADMIN))
