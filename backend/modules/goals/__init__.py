"""
Goals module.

Fitness goals owned by a single user.
"""

from .models import Goal, GoalStatus, CreateGoalRequest, UpdateGoalRequest
from .exceptions import GoalNotFoundError

__all__ = [
    "Goal",
    "GoalStatus",
    "CreateGoalRequest",
    "UpdateGoalRequest",
    "GoalNotFoundError",
]
