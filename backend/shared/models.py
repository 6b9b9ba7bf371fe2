"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Roles a user can hold."""

    MEMBER = "Member"
    ADMIN = "Admin"


class SubscriptionStatus(str, Enum):
    """Billing subscription states."""

    INACTIVE = "inactive"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"


class PlanTier(str, Enum):
    """Plan tiers."""

    FREE = "free"
    PREMIUM = "premium"


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Resolved by the auth guard from the session token and the current user
    record, then made available to route handlers via dependency injection.
    Never carries the password hash or the verification token.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="User's email address")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    role: UserRole = Field(default=UserRole.MEMBER, description="User role")
    is_verified: bool = Field(default=False, description="Whether email is verified")
    subscription_status: SubscriptionStatus = Field(default=SubscriptionStatus.INACTIVE)
    plan_tier: PlanTier = Field(default=PlanTier.FREE)
    created_at: Optional[datetime] = Field(None, description="Account creation time")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
