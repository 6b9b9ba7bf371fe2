"""
Goals module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class GoalStatus(str, Enum):
    """Progress states of a fitness goal."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Goal(BaseModel):
    """A fitness goal owned by one user."""

    id: str = Field(..., description="Goal ID (UUID)")
    user_id: str = Field(..., description="Owner user ID")
    description: Optional[str] = Field(None, description="What the user wants to achieve")
    status: GoalStatus = Field(default=GoalStatus.OPEN)
    created_at: datetime
    updated_at: datetime


class CreateGoalRequest(BaseModel):
    description: str = Field(..., min_length=1, max_length=255)


class UpdateGoalRequest(BaseModel):
    """Sparse update; absent fields keep their value."""

    description: Optional[str] = Field(None, min_length=1, max_length=255)
    status: Optional[GoalStatus] = None


class GoalResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    goal: Goal


class GoalListResponse(BaseModel):
    success: bool = True
    goals: list[Goal]
