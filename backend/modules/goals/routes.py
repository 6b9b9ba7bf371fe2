"""
Goal API endpoints.

All endpoints require authentication and only ever touch the caller's goals.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_goal_service
from api.middleware.auth import RequireAuth
from shared.models import AuthenticatedUser

from .models import (
    CreateGoalRequest,
    GoalListResponse,
    GoalResponse,
    UpdateGoalRequest,
)
from .service import GoalService

router = APIRouter()


@router.post("", response_model=GoalResponse, status_code=201)
async def create_goal(
    request: CreateGoalRequest,
    user: AuthenticatedUser = RequireAuth,
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    """
    Create a new goal in 'open' status.
    """
    goal = await service.create_goal(user.id, request)
    return GoalResponse(goal=goal)


@router.get("", response_model=GoalListResponse)
async def list_goals(
    user: AuthenticatedUser = RequireAuth,
    service: GoalService = Depends(get_goal_service),
) -> GoalListResponse:
    """
    List the current user's goals, most recent first.
    """
    return GoalListResponse(goals=await service.list_goals(user.id))


@router.put("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: str,
    request: UpdateGoalRequest,
    user: AuthenticatedUser = RequireAuth,
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse:
    """
    Update a goal's description or status.
    """
    goal = await service.update_goal(goal_id, user.id, request)
    return GoalResponse(message="Goal updated successfully", goal=goal)


@router.delete("/{goal_id}", status_code=204)
async def delete_goal(
    goal_id: str,
    user: AuthenticatedUser = RequireAuth,
    service: GoalService = Depends(get_goal_service),
) -> None:
    """
    Delete a goal.
    """
    await service.delete_goal(goal_id, user.id)
