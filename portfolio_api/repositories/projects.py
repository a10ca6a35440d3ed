"""
Project gateway
"""

from typing import Any, Dict

from portfolio_api.models.project import Project
from portfolio_api.repositories.base import BaseRepository
from portfolio_api.schemas.project import ProjectEntity


class ProjectRepository(BaseRepository[ProjectEntity]):
    model = Project
    entity = ProjectEntity

    def _defaults(self) -> Dict[str, Any]:
        return {
            "gallery": [],
            "collaborators": [],
            "metrics": {"views": 0, "likes": 0, "shares": 0},
        }
