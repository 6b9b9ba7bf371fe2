"""
Project API endpoints for clients.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_project_service
from api.middleware.auth import RequireAuth
from shared.models import AuthenticatedUser

from .models import ProjectResponse
from .service import ProjectService

router = APIRouter()


@router.get("/mine", response_model=ProjectResponse)
async def get_my_project(
    user: AuthenticatedUser = RequireAuth,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """
    Get the current user's project dashboard.
    """
    return ProjectResponse(project=await service.get_my_project(user.id))
