"""
Project service implementation.
"""

import logging
from typing import Optional

from modules.auth.exceptions import AccountNotFoundError
from modules.auth.interfaces import IUserRepository

from .exceptions import ProjectNotFoundError
from .models import Project, ProjectUpdate
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService:
    """Client projects: read by their owner, managed by admins."""

    def __init__(self, repository: ProjectRepository, users: IUserRepository):
        self._repo = repository
        self._users = users

    async def get_my_project(self, user_id: str) -> Project:
        project = self._repo.get_by_user(user_id)
        if project is None:
            raise ProjectNotFoundError(user_id)
        return project

    async def get_projects_for(self, user_ids: list[str]) -> dict[str, Project]:
        return self._repo.list_by_users(user_ids)

    async def upsert_for_user(self, user_id: str, update: ProjectUpdate) -> Project:
        """
        Find or create the client's project, then apply the given fields.

        Raises:
            AccountNotFoundError: If the user does not exist
        """
        if self._users.get_by_id(user_id) is None:
            raise AccountNotFoundError(user_id)

        project: Optional[Project] = self._repo.get_by_user(user_id)
        if project is None:
            project = self._repo.create_default(user_id)
            logger.info(f"Created project {project.id} for user {user_id}")

        fields = update.model_dump(exclude_unset=True, exclude_none=True)
        if not fields:
            return project

        updated = self._repo.update(project.id, fields)
        if updated is None:
            raise ProjectNotFoundError(user_id)
        return updated
