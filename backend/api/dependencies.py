"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The container is built from a single Settings object
and passes it down to every repository and service it creates.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import UserRepository
    from modules.billing.service import BillingService
    from modules.goals.service import GoalService
    from modules.logs.service import LogService
    from modules.projects.service import ProjectService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._db: "Client | None" = None
        self._user_repository: "UserRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._goal_service: "GoalService | None" = None
        self._log_service: "LogService | None" = None
        self._project_service: "ProjectService | None" = None
        self._billing_service: "BillingService | None" = None

    @property
    def db(self) -> "Client":
        """Get the Supabase service client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client(self.settings)
        return self._db

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.notifications import VerificationMailer
            from modules.auth.passwords import PasswordHasher
            from modules.auth.service import AuthService
            from modules.auth.tokens import TokenCodec
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=PasswordHasher(self.settings.password_hash_rounds),
                codec=TokenCodec.from_settings(self.settings),
                notifier=VerificationMailer(self.settings),
            )
        return self._auth_service

    @property
    def goals(self) -> "GoalService":
        """Get the goal service instance."""
        if self._goal_service is None:
            from modules.goals.repository import GoalRepository
            from modules.goals.service import GoalService
            self._goal_service = GoalService(GoalRepository(self.db))
        return self._goal_service

    @property
    def logs(self) -> "LogService":
        """Get the exercise log service instance."""
        if self._log_service is None:
            from modules.logs.repository import LogRepository
            from modules.logs.service import LogService
            self._log_service = LogService(LogRepository(self.db))
        return self._log_service

    @property
    def projects(self) -> "ProjectService":
        """Get the project service instance."""
        if self._project_service is None:
            from modules.projects.repository import ProjectRepository
            from modules.projects.service import ProjectService
            self._project_service = ProjectService(
                ProjectRepository(self.db),
                users=self.user_repository,
            )
        return self._project_service

    @property
    def billing(self) -> "BillingService":
        """Get the billing service instance."""
        if self._billing_service is None:
            from modules.billing.service import BillingService
            self._billing_service = BillingService(self.settings, self.user_repository)
        return self._billing_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._user_repository = None
        self._auth_service = None
        self._goal_service = None
        self._log_service = None
        self._project_service = None
        self._billing_service = None


# Module-level container singleton
_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer(get_settings())
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_goal_service() -> "GoalService":
    """FastAPI dependency for goal service."""
    return get_container().goals


def get_log_service() -> "LogService":
    """FastAPI dependency for exercise log service."""
    return get_container().logs


def get_project_service() -> "ProjectService":
    """FastAPI dependency for project service."""
    return get_container().projects


def get_billing_service() -> "BillingService":
    """FastAPI dependency for billing service."""
    return get_container().billing
