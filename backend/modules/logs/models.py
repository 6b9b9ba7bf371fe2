"""
Exercise log data models.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field


class ExerciseLog(BaseModel):
    """One recorded training set for one user."""

    id: str = Field(..., description="Log entry ID (UUID)")
    user_id: str = Field(..., description="Owner user ID")
    date: dt.date
    exercise: str
    weight: float = Field(0, description="Weight lifted, in the user's unit")
    reps: int
    sets: int
    created_at: dt.datetime
    updated_at: dt.datetime


class CreateLogRequest(BaseModel):
    date: dt.date = Field(default_factory=dt.date.today)
    exercise: str = Field(..., min_length=1, max_length=255)
    weight: float = Field(0, ge=0)
    reps: int = Field(..., ge=1)
    sets: int = Field(..., ge=1)


class UpdateLogRequest(BaseModel):
    """Sparse update; absent fields keep their value."""

    date: Optional[dt.date] = None
    exercise: Optional[str] = Field(None, min_length=1, max_length=255)
    weight: Optional[float] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=1)
    sets: Optional[int] = Field(None, ge=1)


class LogResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    log: ExerciseLog


class LogListResponse(BaseModel):
    success: bool = True
    logs: list[ExerciseLog]
