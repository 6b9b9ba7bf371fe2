"""
Project repository for database access.

``projects.user_id`` is unique, so a user has at most one row.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import UNIQUE_VIOLATION, OwnedRepository

from .models import (
    DEFAULT_NEXT_INVOICE_DATE,
    DEFAULT_PROJECT_NAME,
    DEFAULT_PROJECT_STATUS,
    Project,
)


class ProjectRepository(OwnedRepository[Project]):
    table = "projects"

    def get_by_user(self, user_id: str) -> Optional[Project]:
        if not self._is_valid_id(user_id):
            return None
        result = self._query().select("*").eq("user_id", user_id).limit(1).execute()
        return self._first(result.data)

    def list_by_users(self, user_ids: list[str]) -> dict[str, Project]:
        """Fetch the projects of several users keyed by user ID."""
        if not user_ids:
            return {}
        result = self._query().select("*").in_("user_id", user_ids).execute()
        projects = [self._map(row) for row in result.data]
        return {project.user_id: project for project in projects}

    def create_default(self, user_id: str) -> Project:
        """Insert the default project, or return the row a concurrent call inserted."""
        try:
            return self.create_owned(user_id, {
                "name": DEFAULT_PROJECT_NAME,
                "status": DEFAULT_PROJECT_STATUS,
                "progress": 0,
                "next_invoice_date": DEFAULT_NEXT_INVOICE_DATE,
                "subscription_amount": 0,
            })
        except APIError as e:
            if e.code != UNIQUE_VIOLATION:
                raise
            existing = self.get_by_user(user_id)
            if existing is None:
                raise
            return existing

    def update(self, project_id: str, fields: dict[str, Any]) -> Optional[Project]:
        data = {**fields, "updated_at": self._now()}
        result = self._query().update(data).eq("id", project_id).execute()
        return self._first(result.data)

    def _map(self, data: dict[str, Any]) -> Project:
        return Project(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            name=data.get("name") or DEFAULT_PROJECT_NAME,
            status=data.get("status") or DEFAULT_PROJECT_STATUS,
            progress=data.get("progress") or 0,
            next_invoice_date=data.get("next_invoice_date") or DEFAULT_NEXT_INVOICE_DATE,
            subscription_amount=float(data.get("subscription_amount") or 0),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
