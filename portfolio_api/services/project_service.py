"""
Project business rules
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, List, Mapping, Optional, Tuple
import logging

from portfolio_api.core.errors import NotFoundError, ValidationError
from portfolio_api.repositories.projects import ProjectRepository
from portfolio_api.schemas.common import ListFilters, Pagination
from portfolio_api.schemas.project import ProjectEntity
from portfolio_api.services.common import paginate, status_stats

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 6


async def list_projects(
    db: AsyncSession,
    page: int = 1,
    limit: int = 10,
    status: Optional[str] = None,
    featured: Optional[bool] = None,
) -> Tuple[List[ProjectEntity], Pagination]:
    return await paginate(ProjectRepository(db), page, limit, status=status, featured=featured)


async def list_featured_projects(db: AsyncSession) -> List[ProjectEntity]:
    """Top featured + published projects"""
    return await ProjectRepository(db).find_all(
        ListFilters(featured=True, status="published", limit=FEATURED_LIMIT)
    )


async def list_published_projects(db: AsyncSession, page: int = 1, limit: int = 12):
    return await paginate(ProjectRepository(db), page, limit, status="published")


async def get_project(db: AsyncSession, project_id: str, published_only: bool = False) -> ProjectEntity:
    project = await ProjectRepository(db).find_by_id(project_id)
    if project is None or (published_only and project.status != "published"):
        raise NotFoundError("Project not found")
    return project


async def create_project(db: AsyncSession, data: Mapping[str, Any]) -> ProjectEntity:
    if not (data.get("title") or "").strip() or not (data.get("description") or "").strip():
        raise ValidationError("Title and description are required")
    if not data.get("technologies"):
        raise ValidationError("At least one technology is required")

    project = await ProjectRepository(db).create(data)
    logger.info("Project created: %s", project.id)
    return project


async def update_project(db: AsyncSession, project_id: str, patch: Dict[str, Any]) -> ProjectEntity:
    repo = ProjectRepository(db)
    if await repo.find_by_id(project_id) is None:
        raise NotFoundError("Project not found")

    project = await repo.update(project_id, patch)
    if project is None:
        raise NotFoundError("Project not found")
    return project


async def delete_project(db: AsyncSession, project_id: str) -> None:
    if not await ProjectRepository(db).delete(project_id):
        raise NotFoundError("Project not found")
    logger.info("Project deleted: %s", project_id)


async def get_project_stats(db: AsyncSession) -> dict:
    return await status_stats(ProjectRepository(db))
