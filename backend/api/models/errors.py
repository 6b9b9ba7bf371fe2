"""
Error response models.

Every error the API returns has an ``error`` summary and a ``detail`` key,
matching the shape FastAPI uses for ``HTTPException``.
"""

from http import HTTPStatus
from typing import Any, Optional

from pydantic import BaseModel

from shared.exceptions import DewhittError


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    detail: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def from_error(cls, status_code: int, exc: DewhittError) -> "ErrorResponse":
        return cls(
            error=HTTPStatus(status_code).phrase,
            detail=exc.message,
            code=exc.code,
        )


class ValidationErrorResponse(BaseModel):
    """Request body or parameter validation failure."""

    error: str = "Validation Error"
    detail: list[dict[str, Any]]
