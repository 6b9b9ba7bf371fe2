"""
Tests for the user repository against a mocked Supabase client.
"""

from unittest.mock import MagicMock

import pytest
from postgrest.exceptions import APIError

from modules.auth.exceptions import EmailAlreadyRegisteredError
from modules.auth.repository import UserRepository
from shared.models import PlanTier, SubscriptionStatus, UserRole

USER_ID = "123e4567-e89b-12d3-a456-426614174000"


def user_row(**overrides) -> dict:
    row = {
        "id": USER_ID,
        "email": "alice@example.com",
        "password_hash": "$2b$04$hash",
        "first_name": "Alice",
        "last_name": "Smith",
        "role": "Member",
        "is_verified": False,
        "verification_token": "abc123",
        "subscription_status": "inactive",
        "plan_tier": "free",
        "stripe_customer_id": None,
        "current_period_end": None,
        "height": None,
        "current_weight": None,
        "goal_weight": None,
        "unit": None,
        "created_at": "2026-01-01T00:00:00+00:00",
        "updated_at": "2026-01-01T00:00:00+00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return UserRepository(mock_db)


class TestLookups:
    def test_get_by_id_maps_row(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            user_row()
        ]
        user = repo.get_by_id(USER_ID)
        mock_db.table.assert_called_with("users")
        assert user.email == "alice@example.com"
        assert user.role == UserRole.MEMBER
        assert user.plan_tier == PlanTier.FREE

    def test_get_by_id_not_found(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        assert repo.get_by_id(USER_ID) is None

    def test_get_by_id_rejects_non_uuid_without_querying(self, repo, mock_db):
        """A non-UUID id cannot match any row."""
        assert repo.get_by_id("not-a-uuid") is None
        mock_db.table.assert_not_called()

    def test_get_by_email_filters_on_email(self, repo, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.eq.return_value.execute.return_value.data = [user_row()]
        repo.get_by_email("alice@example.com")
        select.eq.assert_called_with("email", "alice@example.com")

    def test_list_by_role_newest_first(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value
        chain.order.return_value.execute.return_value.data = [user_row()]
        users = repo.list_by_role(UserRole.MEMBER)
        mock_db.table.return_value.select.return_value.eq.assert_called_with("role", "Member")
        chain.order.assert_called_with("created_at", desc=True)
        assert len(users) == 1


class TestCreate:
    def test_create_returns_record(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [user_row()]
        user = repo.create({"email": "alice@example.com"})
        assert user.id == USER_ID

    def test_unique_violation_becomes_conflict(self, repo, mock_db):
        """The store's unique constraint is reported as a duplicate email."""
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "23505", "message": "duplicate key value violates unique constraint"}
        )
        with pytest.raises(EmailAlreadyRegisteredError):
            repo.create({"email": "alice@example.com"})

    def test_other_database_errors_propagate(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"code": "42P01", "message": "relation does not exist"}
        )
        with pytest.raises(APIError):
            repo.create({"email": "alice@example.com"})


class TestConsumeVerificationToken:
    def test_single_conditional_update(self, repo, mock_db):
        """Verification flips the flag and clears the token in one UPDATE."""
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.execute.return_value.data = [
            user_row(is_verified=True, verification_token=None)
        ]
        user = repo.consume_verification_token("abc123")

        data = update.call_args[0][0]
        assert data["is_verified"] is True
        assert data["verification_token"] is None
        update.return_value.eq.assert_called_with("verification_token", "abc123")
        mock_db.table.return_value.select.assert_not_called()
        assert user.is_verified is True

    def test_no_matching_row(self, repo, mock_db):
        mock_db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = []
        assert repo.consume_verification_token("used") is None


class TestMutations:
    def test_update_adds_timestamp(self, repo, mock_db):
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.execute.return_value.data = [user_row(first_name="Al")]
        user = repo.update(USER_ID, {"first_name": "Al"})
        data = update.call_args[0][0]
        assert data["first_name"] == "Al"
        assert "updated_at" in data
        assert user.first_name == "Al"

    def test_update_billing_serializes_enums(self, repo, mock_db):
        update = mock_db.table.return_value.update
        update.return_value.eq.return_value.execute.return_value.data = [user_row()]
        repo.update_billing(
            USER_ID,
            subscription_status=SubscriptionStatus.ACTIVE,
            plan_tier=PlanTier.PREMIUM,
            stripe_customer_id="cus_1",
        )
        data = update.call_args[0][0]
        assert data["subscription_status"] == "active"
        assert data["plan_tier"] == "premium"
        assert data["stripe_customer_id"] == "cus_1"
        assert "current_period_end" not in data

    def test_delete(self, repo, mock_db):
        mock_db.table.return_value.delete.return_value.eq.return_value.execute.return_value.data = [
            user_row()
        ]
        assert repo.delete(USER_ID) is True

    def test_delete_missing(self, repo, mock_db):
        mock_db.table.return_value.delete.return_value.eq.return_value.execute.return_value.data = []
        assert repo.delete(USER_ID) is False
