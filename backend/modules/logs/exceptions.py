"""
Exercise log exceptions.
"""

from shared.exceptions import NotFoundError


class LogNotFoundError(NotFoundError):
    """Raised when a log entry does not exist or belongs to another user."""

    def __init__(self, log_id: str):
        super().__init__(
            f"Log entry not found: {log_id}",
            code="LOG_NOT_FOUND",
            details={"log_id": log_id},
        )
