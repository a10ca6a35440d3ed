"""
Blog API router
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from portfolio_api.core.database import get_db
from portfolio_api.core.responses import success
from portfolio_api.core.security import get_current_user, require_editor
from portfolio_api.schemas.common import ContentStatus
from portfolio_api.schemas.blog import BlogPostCreate, BlogPostUpdate
from portfolio_api.schemas.user import UserPublic
from portfolio_api.services import blog_service, seo_service

router = APIRouter()


# Public

@router.get("/featured")
async def get_featured_posts(db: AsyncSession = Depends(get_db)):
    posts = await blog_service.list_featured_posts(db)
    return success(posts)


@router.get("/published")
async def get_published_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    posts, pagination = await blog_service.list_published_posts(db, page, limit)
    return success(posts, pagination=pagination)


@router.get("/published/{post_id}")
async def get_published_post(post_id: str, db: AsyncSession = Depends(get_db)):
    post = await blog_service.get_post(db, post_id, published_only=True)
    return success(post)


# Protected

@router.get("")
async def get_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status: Optional[ContentStatus] = Query(None),
    featured: Optional[bool] = Query(None),
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(get_current_user),
):
    posts, pagination = await blog_service.list_posts(db, page, limit, status=status, featured=featured)
    return success(posts, pagination=pagination)


@router.get("/stats")
async def get_blog_stats(
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    return success(await blog_service.get_blog_stats(db))


@router.get("/{post_id}")
async def get_post(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(get_current_user),
):
    return success(await blog_service.get_post(db, post_id))


@router.post("", status_code=201)
async def create_post(
    payload: BlogPostCreate,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    post = await blog_service.create_post(db, payload.to_data())
    return success(post, message="Blog post created successfully", status_code=201)


@router.put("/{post_id}")
async def update_post(
    post_id: str,
    payload: BlogPostUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    post = await blog_service.update_post(db, post_id, payload.to_patch())
    return success(post, message="Blog post updated successfully")


@router.delete("/{post_id}")
async def delete_post(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    await blog_service.delete_post(db, post_id)
    return success(message="Blog post deleted successfully")


@router.get("/{post_id}/seo-score")
async def get_post_seo_score(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(get_current_user),
):
    post = await blog_service.get_post(db, post_id)
    return success(seo_service.score_blog_post(post))
