"""
Goals service implementation.

Every operation is scoped to the calling user; a goal owned by someone
else is reported as not found.
"""

from .exceptions import GoalNotFoundError
from .models import CreateGoalRequest, Goal, GoalStatus, UpdateGoalRequest
from .repository import GoalRepository


class GoalService:
    """CRUD for a user's goals."""

    def __init__(self, repository: GoalRepository):
        self._repo = repository

    async def create_goal(self, user_id: str, request: CreateGoalRequest) -> Goal:
        return self._repo.create_owned(user_id, {
            "description": request.description,
            "status": GoalStatus.OPEN.value,
        })

    async def list_goals(self, user_id: str) -> list[Goal]:
        """List the user's goals, most recent first."""
        return self._repo.list_owned(user_id)

    async def get_goal(self, goal_id: str, user_id: str) -> Goal:
        goal = self._repo.get_owned(goal_id, user_id)
        if goal is None:
            raise GoalNotFoundError(goal_id)
        return goal

    async def update_goal(self, goal_id: str, user_id: str, request: UpdateGoalRequest) -> Goal:
        fields = request.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        if not fields:
            return await self.get_goal(goal_id, user_id)

        goal = self._repo.update_owned(goal_id, user_id, fields)
        if goal is None:
            raise GoalNotFoundError(goal_id)
        return goal

    async def delete_goal(self, goal_id: str, user_id: str) -> None:
        if not self._repo.delete_owned(goal_id, user_id):
            raise GoalNotFoundError(goal_id)
