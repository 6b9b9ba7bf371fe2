"""
Exercise logs module.
"""

from .models import ExerciseLog, CreateLogRequest, UpdateLogRequest
from .exceptions import LogNotFoundError

__all__ = [
    "ExerciseLog",
    "CreateLogRequest",
    "UpdateLogRequest",
    "LogNotFoundError",
]
