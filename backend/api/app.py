"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .errors import register_exception_handlers
from .routes import admin, health, users
from modules.auth.routes import router as auth_router
from modules.billing.routes import router as billing_router
from modules.goals.routes import router as goals_router
from modules.logs.routes import router as logs_router
from modules.projects.routes import router as projects_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic. Startup fails when no token signing
    secret is configured.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    settings.require_signing_secret()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Accounts, coaching data and client projects for DeWhitt",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    # Legacy unprefixed auth paths used by older clients
    app.include_router(auth_router, include_in_schema=False)
    app.include_router(users.router, prefix="/api/user", tags=["user"])
    app.include_router(goals_router, prefix="/api/goals", tags=["goals"])
    app.include_router(logs_router, prefix="/api/logs", tags=["logs"])
    app.include_router(projects_router, prefix="/api/projects", tags=["projects"])
    app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
    app.include_router(billing_router, prefix="/api/billing", tags=["billing"])

    return app


# Application instance for uvicorn
app = create_app()
