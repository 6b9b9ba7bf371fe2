"""
Exercise log service implementation.
"""

from .exceptions import LogNotFoundError
from .models import CreateLogRequest, ExerciseLog, UpdateLogRequest
from .repository import LogRepository


class LogService:
    """CRUD for a user's exercise log; foreign entries are reported as missing."""

    def __init__(self, repository: LogRepository):
        self._repo = repository

    async def create_log(self, user_id: str, request: CreateLogRequest) -> ExerciseLog:
        return self._repo.create_owned(user_id, request.model_dump(mode="json"))

    async def list_logs(self, user_id: str) -> list[ExerciseLog]:
        return self._repo.list_for_user(user_id)

    async def get_log(self, log_id: str, user_id: str) -> ExerciseLog:
        entry = self._repo.get_owned(log_id, user_id)
        if entry is None:
            raise LogNotFoundError(log_id)
        return entry

    async def update_log(self, log_id: str, user_id: str, request: UpdateLogRequest) -> ExerciseLog:
        fields = request.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        if not fields:
            return await self.get_log(log_id, user_id)

        entry = self._repo.update_owned(log_id, user_id, fields)
        if entry is None:
            raise LogNotFoundError(log_id)
        return entry

    async def delete_log(self, log_id: str, user_id: str) -> None:
        if not self._repo.delete_owned(log_id, user_id):
            raise LogNotFoundError(log_id)
