"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the helpers every table mapper needs.
"""

from datetime import datetime, timezone
from typing import Any, Optional, TypeVar, Generic
from uuid import UUID
from supabase import Client


T = TypeVar("T")

# Postgres SQLSTATE for a unique constraint violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses set ``table`` and implement ``_map`` to turn a row into a
    Pydantic model.

    Example:
        class GoalRepository(BaseRepository[Goal]):
            table = "goals"

            def get_owned(self, goal_id: str, user_id: str) -> Optional[Goal]:
                result = (
                    self._query().select("*")
                    .eq("id", goal_id).eq("user_id", user_id).execute()
                )
                return self._first(result.data)
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _query(self):
        """Start a query builder on this repository's table."""
        return self._db.table(self.table)

    def _map(self, data: dict[str, Any]) -> T:
        raise NotImplementedError

    def _first(self, rows: Optional[list[dict[str, Any]]]) -> Optional[T]:
        """Map the first row of a result, or None when there is none."""
        if not rows:
            return None
        return self._map(rows[0])

    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _is_valid_id(record_id: str) -> bool:
        """IDs are UUIDs; anything else cannot match a row."""
        try:
            UUID(str(record_id))
        except ValueError:
            return False
        return True


class OwnedRepository(BaseRepository[T]):
    """
    Base class for tables whose rows belong to exactly one user.

    Every read, update and delete filters on both the row ID and the owner
    ID. A row owned by someone else is indistinguishable from a missing row.
    """

    owner_column: str = "user_id"

    def _owned(self, query, record_id: str, owner_id: str):
        return query.eq("id", record_id).eq(self.owner_column, owner_id)

    def create_owned(self, owner_id: str, data: dict[str, Any]) -> T:
        row = {**data, self.owner_column: owner_id}
        result = self._query().insert(row).execute()
        return self._map(result.data[0])

    def get_owned(self, record_id: str, owner_id: str) -> Optional[T]:
        if not self._is_valid_id(record_id):
            return None
        result = self._owned(self._query().select("*"), record_id, owner_id).execute()
        return self._first(result.data)

    def list_owned(self, owner_id: str, order_by: tuple[str, ...] = ("created_at",)) -> list[T]:
        """List an owner's rows, newest first on each ``order_by`` column."""
        query = self._query().select("*").eq(self.owner_column, owner_id)
        for column in order_by:
            query = query.order(column, desc=True)
        result = query.execute()
        return [self._map(row) for row in result.data]

    def update_owned(self, record_id: str, owner_id: str, fields: dict[str, Any]) -> Optional[T]:
        """
        Apply a sparse update to an owned row.

        Returns:
            The updated row, or None if no row matched (id, owner).
        """
        if not self._is_valid_id(record_id):
            return None
        data = {**fields, "updated_at": self._now()}
        result = self._owned(self._query().update(data), record_id, owner_id).execute()
        return self._first(result.data)

    def delete_owned(self, record_id: str, owner_id: str) -> bool:
        """
        Delete an owned row.

        Returns:
            True if a row matching (id, owner) was deleted.
        """
        if not self._is_valid_id(record_id):
            return False
        result = self._owned(self._query().delete(), record_id, owner_id).execute()
        return bool(result.data)
