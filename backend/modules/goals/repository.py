"""
Goal repository for database access.
"""

from typing import Any

from shared.repository import OwnedRepository

from .models import Goal, GoalStatus


class GoalRepository(OwnedRepository[Goal]):
    """Owner-scoped access to the goals table."""

    table = "goals"

    def _map(self, data: dict[str, Any]) -> Goal:
        """Map database row to Goal model."""
        return Goal(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            description=data.get("description"),
            status=GoalStatus(data.get("status") or GoalStatus.OPEN.value),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
