"""
Project module exceptions.
"""

from shared.exceptions import NotFoundError


class ProjectNotFoundError(NotFoundError):
    """Raised when a user has no project yet."""

    def __init__(self, user_id: str):
        super().__init__(
            "No project found for this user",
            code="PROJECT_NOT_FOUND",
            details={"user_id": user_id},
        )
