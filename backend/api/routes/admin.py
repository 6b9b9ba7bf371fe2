"""
Admin endpoints.

Client management for coaches. Every route requires the Admin role:
401 without a valid session, 403 for other roles.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.auth.interfaces import IAuthService
from modules.auth.models import UserProfile
from modules.projects.models import Project, ProjectUpdate
from modules.projects.service import ProjectService
from ..dependencies import get_auth_service, get_project_service
from ..middleware.auth import RequireAdmin

router = APIRouter(dependencies=[RequireAdmin])


class ClientSummary(BaseModel):
    """A member account together with its project, if any."""

    user: UserProfile
    project: Optional[Project] = None


class ClientListResponse(BaseModel):
    success: bool = True
    clients: list[ClientSummary]


class ProjectUpdateResponse(BaseModel):
    success: bool = True
    message: str = "Project updated successfully"
    project: Project


@router.get("/clients", response_model=ClientListResponse)
async def list_clients(
    auth: IAuthService = Depends(get_auth_service),
    projects: ProjectService = Depends(get_project_service),
) -> ClientListResponse:
    """
    List every member account with its project, newest accounts first.
    """
    members = await auth.list_members()
    by_user = await projects.get_projects_for([member.id for member in members])
    return ClientListResponse(clients=[
        ClientSummary(user=member, project=by_user.get(member.id))
        for member in members
    ])


@router.put("/project/{user_id}", response_model=ProjectUpdateResponse)
async def update_client_project(
    user_id: str,
    update: ProjectUpdate,
    projects: ProjectService = Depends(get_project_service),
) -> ProjectUpdateResponse:
    """
    Create the client's project if needed and apply the given fields.

    Returns 404 if the user does not exist.
    """
    project = await projects.upsert_for_user(user_id, update)
    return ProjectUpdateResponse(project=project)


@router.delete("/users/{user_id}", status_code=204)
async def delete_user(
    user_id: str,
    auth: IAuthService = Depends(get_auth_service),
) -> None:
    """
    Delete a user account. Their goals, logs and project go with it.
    """
    await auth.delete_user(user_id)
