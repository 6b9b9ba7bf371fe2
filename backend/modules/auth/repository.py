"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
Email uniqueness and verification-token uniqueness are enforced by the
schema (see migrations/001_initial_schema.sql).
"""

from datetime import datetime
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.models import PlanTier, SubscriptionStatus, UserRole
from shared.repository import UNIQUE_VIOLATION, BaseRepository

from .exceptions import EmailAlreadyRegisteredError
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user records.

    Note: This repository does NOT perform authorization checks.
    The service layer decides who may read or change which user.
    """

    table = "users"

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        if not self._is_valid_id(user_id):
            return None
        result = self._query().select("*").eq("id", user_id).execute()
        return self._first(result.data)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Exact, case-sensitive match on the stored email."""
        result = self._query().select("*").eq("email", email).execute()
        return self._first(result.data)

    def get_by_customer_id(self, customer_id: str) -> Optional[UserRecord]:
        result = self._query().select("*").eq("stripe_customer_id", customer_id).execute()
        return self._first(result.data)

    def list_by_role(self, role: UserRole) -> list[UserRecord]:
        result = (
            self._query()
            .select("*")
            .eq("role", role.value)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create(self, data: dict[str, Any]) -> UserRecord:
        """
        Insert a new user.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        try:
            result = self._query().insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise EmailAlreadyRegisteredError()
            raise
        return self._map(result.data[0])

    def consume_verification_token(self, token: str) -> Optional[UserRecord]:
        """
        Mark the account holding ``token`` verified and clear the token.

        Runs as one conditional UPDATE, so two concurrent calls with the same
        token cannot both match a row.

        Returns:
            The verified user, or None if no account holds the token.
        """
        result = (
            self._query()
            .update({
                "is_verified": True,
                "verification_token": None,
                "updated_at": self._now(),
            })
            .eq("verification_token", token)
            .execute()
        )
        return self._first(result.data)

    def update(self, user_id: str, fields: dict[str, Any]) -> Optional[UserRecord]:
        """
        Apply a sparse update to a user.

        Args:
            user_id: The user UUID.
            fields: Only the columns to change.

        Returns:
            The updated user, or None if it no longer exists.
        """
        if not self._is_valid_id(user_id):
            return None
        data = {**fields, "updated_at": self._now()}
        result = self._query().update(data).eq("id", user_id).execute()
        return self._first(result.data)

    def update_billing(
        self,
        user_id: str,
        subscription_status: Optional[SubscriptionStatus] = None,
        plan_tier: Optional[PlanTier] = None,
        stripe_customer_id: Optional[str] = None,
        current_period_end: Optional[datetime] = None,
    ) -> Optional[UserRecord]:
        """Update subscription fields from a billing event."""
        fields: dict[str, Any] = {}
        if subscription_status is not None:
            fields["subscription_status"] = subscription_status.value
        if plan_tier is not None:
            fields["plan_tier"] = plan_tier.value
        if stripe_customer_id is not None:
            fields["stripe_customer_id"] = stripe_customer_id
        if current_period_end is not None:
            fields["current_period_end"] = current_period_end.isoformat()
        return self.update(user_id, fields)

    def delete(self, user_id: str) -> bool:
        """
        Delete a user.

        Owned goals, logs and projects are removed via ON DELETE CASCADE.

        Returns:
            True if a row was deleted.
        """
        if not self._is_valid_id(user_id):
            return False
        result = self._query().delete().eq("id", user_id).execute()
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            role=UserRole(data.get("role") or UserRole.MEMBER.value),
            is_verified=bool(data.get("is_verified", False)),
            verification_token=data.get("verification_token"),
            subscription_status=SubscriptionStatus(
                data.get("subscription_status") or SubscriptionStatus.INACTIVE.value
            ),
            plan_tier=PlanTier(data.get("plan_tier") or PlanTier.FREE.value),
            stripe_customer_id=data.get("stripe_customer_id"),
            current_period_end=data.get("current_period_end"),
            height=data.get("height"),
            current_weight=data.get("current_weight"),
            goal_weight=data.get("goal_weight"),
            unit=data.get("unit"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
