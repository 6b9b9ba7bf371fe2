"""
Projects module.

One client-dashboard project per user, maintained by admins.
"""

from .models import Project, ProjectUpdate
from .exceptions import ProjectNotFoundError

__all__ = [
    "Project",
    "ProjectUpdate",
    "ProjectNotFoundError",
]
