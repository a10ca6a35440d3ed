"""
Testimonial business rules
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, List, Mapping, Optional, Tuple
import logging

from portfolio_api.core.errors import NotFoundError
from portfolio_api.repositories.testimonials import TestimonialRepository
from portfolio_api.schemas.common import ListFilters, Pagination
from portfolio_api.schemas.testimonial import TestimonialEntity
from portfolio_api.services.common import paginate

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 6


async def list_testimonials(
    db: AsyncSession,
    page: int = 1,
    limit: int = 10,
    featured: Optional[bool] = None,
    approved: Optional[bool] = None,
) -> Tuple[List[TestimonialEntity], Pagination]:
    return await paginate(TestimonialRepository(db), page, limit, featured=featured, approved=approved)


async def list_featured_testimonials(db: AsyncSession) -> List[TestimonialEntity]:
    return await TestimonialRepository(db).find_all(
        ListFilters(featured=True, approved=True, limit=FEATURED_LIMIT)
    )


async def list_approved_testimonials(db: AsyncSession, page: int = 1, limit: int = 12):
    return await paginate(TestimonialRepository(db), page, limit, approved=True)


async def get_testimonial(db: AsyncSession, testimonial_id: str) -> TestimonialEntity:
    testimonial = await TestimonialRepository(db).find_by_id(testimonial_id)
    if testimonial is None:
        raise NotFoundError("Testimonial not found")
    return testimonial


async def create_testimonial(db: AsyncSession, data: Mapping[str, Any]) -> TestimonialEntity:
    testimonial = await TestimonialRepository(db).create(data)
    logger.info("Testimonial created: %s", testimonial.id)
    return testimonial


async def update_testimonial(db: AsyncSession, testimonial_id: str, patch: Dict[str, Any]) -> TestimonialEntity:
    testimonial = await TestimonialRepository(db).update(testimonial_id, patch)
    if testimonial is None:
        raise NotFoundError("Testimonial not found")
    return testimonial


async def delete_testimonial(db: AsyncSession, testimonial_id: str) -> None:
    if not await TestimonialRepository(db).delete(testimonial_id):
        raise NotFoundError("Testimonial not found")
    logger.info("Testimonial deleted: %s", testimonial_id)


async def get_testimonial_stats(db: AsyncSession) -> dict:
    repo = TestimonialRepository(db)
    return {
        "total": await repo.count(),
        "approved": await repo.count(ListFilters(approved=True)),
        "pending": await repo.count(ListFilters(approved=False)),
        "featured": await repo.count(ListFilters(featured=True)),
    }
