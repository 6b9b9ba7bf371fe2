"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.config import Settings, get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    signing_secret: str
    mail: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(settings: Settings = Depends(get_settings)):
    """
    Readiness check endpoint.

    Reports which required settings are present. Returns 503 until the
    database and signing secret are configured; mail is optional.
    """
    database_ok = bool(settings.supabase_url and settings.supabase_service_role_key)
    secret_ok = bool(settings.jwt_secret)
    body = ReadinessResponse(
        status="ready" if database_ok and secret_ok else "not_ready",
        database="configured" if database_ok else "missing",
        signing_secret="configured" if secret_ok else "missing",
        mail="configured" if settings.mail_configured else "disabled",
    )
    if body.status != "ready":
        return JSONResponse(status_code=503, content=body.model_dump())
    return body
