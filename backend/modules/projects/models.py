"""
Client project data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_PROJECT_NAME = "New DeWhitt Project"
DEFAULT_PROJECT_STATUS = "Onboarding"
DEFAULT_NEXT_INVOICE_DATE = "TBD"


class Project(BaseModel):
    """The single client-dashboard project attached to a user."""

    id: str = Field(..., description="Project ID (UUID)")
    user_id: str = Field(..., description="Client user ID")
    name: str = DEFAULT_PROJECT_NAME
    status: str = DEFAULT_PROJECT_STATUS
    progress: int = Field(0, ge=0, le=100, description="Completion percentage")
    next_invoice_date: str = DEFAULT_NEXT_INVOICE_DATE
    subscription_amount: float = Field(0, ge=0)
    created_at: datetime
    updated_at: datetime


class ProjectUpdate(BaseModel):
    """Sparse admin update of a client's project."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    status: Optional[str] = Field(None, min_length=1, max_length=100)
    progress: Optional[int] = Field(None, ge=0, le=100)
    next_invoice_date: Optional[str] = Field(None, max_length=100)
    subscription_amount: Optional[float] = Field(None, ge=0)


class ProjectResponse(BaseModel):
    success: bool = True
    project: Project
