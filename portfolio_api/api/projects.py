"""
Project API router
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from portfolio_api.core.database import get_db
from portfolio_api.core.responses import success
from portfolio_api.core.security import get_current_user, require_editor
from portfolio_api.schemas.common import ContentStatus
from portfolio_api.schemas.project import ProjectCreate, ProjectUpdate
from portfolio_api.schemas.user import UserPublic
from portfolio_api.services import project_service

router = APIRouter()


# Public

@router.get("/featured")
async def get_featured_projects(db: AsyncSession = Depends(get_db)):
    projects = await project_service.list_featured_projects(db)
    return success(projects)


@router.get("/published")
async def get_published_projects(
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    projects, pagination = await project_service.list_published_projects(db, page, limit)
    return success(projects, pagination=pagination)


@router.get("/published/{project_id}")
async def get_published_project(project_id: str, db: AsyncSession = Depends(get_db)):
    project = await project_service.get_project(db, project_id, published_only=True)
    return success(project)


# Protected

@router.get("")
async def get_projects(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status: Optional[ContentStatus] = Query(None),
    featured: Optional[bool] = Query(None),
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(get_current_user),
):
    projects, pagination = await project_service.list_projects(db, page, limit, status=status, featured=featured)
    return success(projects, pagination=pagination)


@router.get("/stats")
async def get_project_stats(
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    return success(await project_service.get_project_stats(db))


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(get_current_user),
):
    return success(await project_service.get_project(db, project_id))


@router.post("", status_code=201)
async def create_project(
    payload: ProjectCreate,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    project = await project_service.create_project(db, payload.to_data())
    return success(project, message="Project created successfully", status_code=201)


@router.put("/{project_id}")
async def update_project(
    project_id: str,
    payload: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    project = await project_service.update_project(db, project_id, payload.to_patch())
    return success(project, message="Project updated successfully")


@router.delete("/{project_id}")
async def delete_project(
    project_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    await project_service.delete_project(db, project_id)
    return success(message="Project deleted successfully")
