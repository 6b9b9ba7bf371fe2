"""
Exercise log API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_log_service
from api.middleware.auth import RequireAuth
from shared.models import AuthenticatedUser

from .models import CreateLogRequest, LogListResponse, LogResponse, UpdateLogRequest
from .service import LogService

router = APIRouter()


@router.post("", response_model=LogResponse, status_code=201)
async def create_log(
    request: CreateLogRequest,
    user: AuthenticatedUser = RequireAuth,
    service: LogService = Depends(get_log_service),
) -> LogResponse:
    """
    Record a training set.
    """
    return LogResponse(log=await service.create_log(user.id, request))


@router.get("", response_model=LogListResponse)
async def list_logs(
    user: AuthenticatedUser = RequireAuth,
    service: LogService = Depends(get_log_service),
) -> LogListResponse:
    """
    List the current user's log entries, latest date first.
    """
    return LogListResponse(logs=await service.list_logs(user.id))


@router.put("/{log_id}", response_model=LogResponse)
async def update_log(
    log_id: str,
    request: UpdateLogRequest,
    user: AuthenticatedUser = RequireAuth,
    service: LogService = Depends(get_log_service),
) -> LogResponse:
    entry = await service.update_log(log_id, user.id, request)
    return LogResponse(message="Log updated successfully", log=entry)


@router.delete("/{log_id}", status_code=204)
async def delete_log(
    log_id: str,
    user: AuthenticatedUser = RequireAuth,
    service: LogService = Depends(get_log_service),
) -> None:
    await service.delete_log(log_id, user.id)
