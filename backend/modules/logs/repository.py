"""
Exercise log repository for database access.
"""

from typing import Any

from shared.repository import OwnedRepository

from .models import ExerciseLog


class LogRepository(OwnedRepository[ExerciseLog]):
    """Owner-scoped access to the exercise_logs table."""

    table = "exercise_logs"

    def list_for_user(self, user_id: str) -> list[ExerciseLog]:
        """Latest training day first, then latest entry within a day."""
        return self.list_owned(user_id, order_by=("date", "created_at"))

    def _map(self, data: dict[str, Any]) -> ExerciseLog:
        return ExerciseLog(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            date=data["date"],
            exercise=data["exercise"],
            weight=data.get("weight") or 0,
            reps=data["reps"],
            sets=data["sets"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
