"""
User profile endpoints.

Every endpoint acts on the authenticated caller's own account.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.auth.exceptions import AccountNotFoundError
from modules.auth.interfaces import IAuthService
from modules.auth.models import ProfileMetrics, ProfileUpdate, UserProfile
from shared.exceptions import AuthorizationError
from shared.models import AuthenticatedUser
from ..dependencies import get_auth_service
from ..middleware.auth import RequireAuth

router = APIRouter()


class ProfileResponse(BaseModel):
    """User profile response model."""

    success: bool = True
    message: Optional[str] = None
    user: UserProfile


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    user: AuthenticatedUser = RequireAuth,
    auth: IAuthService = Depends(get_auth_service),
) -> ProfileResponse:
    """
    Get the current user's profile.

    Never includes the password hash or verification token.
    """
    profile = await auth.get_user_by_id(user.id)
    if profile is None:
        raise AccountNotFoundError(user.id)
    return ProfileResponse(user=profile)


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    update: ProfileUpdate,
    user: AuthenticatedUser = RequireAuth,
    auth: IAuthService = Depends(get_auth_service),
) -> ProfileResponse:
    """
    Update name and/or password. Omitted fields are left unchanged.
    """
    profile = await auth.update_profile(user.id, update)
    return ProfileResponse(message="Profile updated successfully", user=profile)


@router.put("/setup-profile/{user_id}", response_model=ProfileResponse)
async def setup_profile(
    user_id: str,
    metrics: ProfileMetrics,
    user: AuthenticatedUser = RequireAuth,
    auth: IAuthService = Depends(get_auth_service),
) -> ProfileResponse:
    """
    Save height and weight metrics after signup.

    The path user ID must be the caller's own.
    """
    if user_id != user.id:
        raise AuthorizationError(
            "Not authorized to set up another user's profile",
            code="PROFILE_FORBIDDEN",
        )
    profile = await auth.save_profile_metrics(user.id, metrics)
    return ProfileResponse(message="Profile setup complete", user=profile)
