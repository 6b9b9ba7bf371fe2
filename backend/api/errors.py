"""
Exception handlers.

Maps the shared exception hierarchy onto HTTP responses so routes and
services can raise domain errors without knowing about status codes.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DewhittError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)

from .models.errors import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins.
STATUS_CODES: list[tuple[type[DewhittError], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (ExternalServiceError, 502),
]


def status_code_for(exc: DewhittError) -> int:
    for error_type, status_code in STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


async def domain_exception_handler(request: Request, exc: DewhittError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    body = ErrorResponse.from_error(status_code, exc)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the API's exception handlers on an application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DewhittError, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
