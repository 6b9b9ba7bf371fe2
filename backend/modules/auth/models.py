"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shared.models import AuthenticatedUser, PlanTier, SubscriptionStatus, UserRole


MIN_PASSWORD_LENGTH = 6


class UserRecord(BaseModel):
    """
    A full row of the users table.

    Internal to the auth module. Carries the password hash and the
    verification token, so it must never be returned from a route.
    """

    id: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    role: UserRole = UserRole.MEMBER
    is_verified: bool = False
    verification_token: Optional[str] = None
    subscription_status: SubscriptionStatus = SubscriptionStatus.INACTIVE
    plan_tier: PlanTier = PlanTier.FREE
    stripe_customer_id: Optional[str] = None
    current_period_end: Optional[datetime] = None
    height: Optional[float] = None
    current_weight: Optional[float] = None
    goal_weight: Optional[float] = None
    unit: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_authenticated(self) -> AuthenticatedUser:
        """Strip the secrets and return the request identity."""
        return AuthenticatedUser(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            role=self.role,
            is_verified=self.is_verified,
            subscription_status=self.subscription_status,
            plan_tier=self.plan_tier,
            created_at=self.created_at,
        )

    def to_profile(self) -> "UserProfile":
        return UserProfile(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            role=self.role,
            is_verified=self.is_verified,
            subscription_status=self.subscription_status,
            plan_tier=self.plan_tier,
            height=self.height,
            current_weight=self.current_weight,
            goal_weight=self.goal_weight,
            unit=self.unit,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def to_summary(self) -> "UserSummary":
        return UserSummary(
            id=self.id,
            name=f"{self.first_name} {self.last_name}",
            email=self.email,
            role=self.role,
            plan_tier=self.plan_tier,
        )


class UserProfile(BaseModel):
    """Public profile of a user. Safe to return to the owner or an admin."""

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address")
    first_name: str
    last_name: str
    role: UserRole
    is_verified: bool
    subscription_status: SubscriptionStatus
    plan_tier: PlanTier
    height: Optional[float] = None
    current_weight: Optional[float] = None
    goal_weight: Optional[float] = None
    unit: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserSummary(BaseModel):
    """Public-safe user summary returned at login."""

    id: str
    name: str = Field(..., description="Display name")
    email: str
    role: UserRole
    plan_tier: PlanTier


class TokenRejectionReason(str, Enum):
    """Why a session token was rejected. Never echoed to the caller."""

    MALFORMED = "malformed"
    BAD_SIGNATURE = "bad_signature"
    EXPIRED = "expired"


class TokenClaims(BaseModel):
    """Decoded session token payload."""

    sub: str = Field(..., description="Subject (user ID)")
    role: UserRole = Field(..., description="Role snapshot at issuance")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    model_config = ConfigDict(frozen=True, extra="ignore")


# -----------------------------------------------------------------------------
# Request / response schemas
# -----------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    """Request to create an account."""

    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class RegisterResponse(BaseModel):
    success: bool = True
    message: str = "Registration successful! Please check your email to verify your account."
    user: UserSummary


class VerifyEmailRequest(BaseModel):
    token: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserSummary


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ProfileUpdate(BaseModel):
    """
    Sparse profile update.

    Only fields present in the request body are applied; absent fields are
    left untouched.
    """

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[str] = Field(None, min_length=MIN_PASSWORD_LENGTH, max_length=128)


class ProfileMetrics(BaseModel):
    """Initial body metrics captured after signup."""

    height: Optional[float] = Field(None, gt=0)
    current_weight: Optional[float] = Field(None, gt=0)
    goal_weight: Optional[float] = Field(None, gt=0)
    unit: Optional[str] = Field(None, max_length=20)
