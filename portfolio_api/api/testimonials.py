"""
Testimonial API router
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from portfolio_api.core.database import get_db
from portfolio_api.core.responses import success
from portfolio_api.core.security import get_current_user, require_editor
from portfolio_api.schemas.testimonial import TestimonialCreate, TestimonialUpdate
from portfolio_api.schemas.user import UserPublic
from portfolio_api.services import testimonial_service

router = APIRouter()


@router.get("/featured")
async def get_featured_testimonials(db: AsyncSession = Depends(get_db)):
    """Featured and approved, newest first"""
    return success(await testimonial_service.list_featured_testimonials(db))


@router.get("/approved")
async def get_approved_testimonials(
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    items, pagination = await testimonial_service.list_approved_testimonials(db, page, limit)
    return success(items, pagination=pagination)


@router.get("")
async def get_testimonials(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    featured: Optional[bool] = Query(None),
    approved: Optional[bool] = Query(None),
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(get_current_user),
):
    items, pagination = await testimonial_service.list_testimonials(
        db, page, limit, featured=featured, approved=approved
    )
    return success(items, pagination=pagination)


@router.get("/stats")
async def get_testimonial_stats(
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    return success(await testimonial_service.get_testimonial_stats(db))


@router.get("/{testimonial_id}")
async def get_testimonial(
    testimonial_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(get_current_user),
):
    return success(await testimonial_service.get_testimonial(db, testimonial_id))


@router.post("", status_code=201)
async def create_testimonial(
    payload: TestimonialCreate,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    testimonial = await testimonial_service.create_testimonial(db, payload.to_data())
    return success(testimonial, message="Testimonial created successfully", status_code=201)


@router.put("/{testimonial_id}")
async def update_testimonial(
    testimonial_id: str,
    payload: TestimonialUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    testimonial = await testimonial_service.update_testimonial(db, testimonial_id, payload.to_patch())
    return success(testimonial, message="Testimonial updated successfully")


@router.delete("/{testimonial_id}")
async def delete_testimonial(
    testimonial_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    await testimonial_service.delete_testimonial(db, testimonial_id)
    return success(message="Testimonial deleted successfully")
