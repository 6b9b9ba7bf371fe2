"""
Goals module exceptions.
"""

from shared.exceptions import NotFoundError


class GoalNotFoundError(NotFoundError):
    """Raised when a goal does not exist or belongs to another user."""

    def __init__(self, goal_id: str):
        super().__init__(
            f"Goal not found: {goal_id}",
            code="GOAL_NOT_FOUND",
            details={"goal_id": goal_id},
        )
