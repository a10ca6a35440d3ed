"""
Blog post business rules

Read time is derived from the word count at 200 words per minute and is
recomputed whenever the content changes.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, List, Mapping, Optional, Tuple
import logging
import math

from portfolio_api.core.database import naive_utc, utcnow
from portfolio_api.core.errors import NotFoundError, ValidationError
from portfolio_api.repositories.blog_posts import BlogPostRepository
from portfolio_api.schemas.blog import BlogPostEntity
from portfolio_api.schemas.common import ListFilters, Pagination
from portfolio_api.services.common import paginate, status_stats

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
FEATURED_LIMIT = 3


def calculate_read_time(content: str) -> int:
    words = len((content or "").split())
    if words == 0:
        return 1
    return math.ceil(words / WORDS_PER_MINUTE)


async def list_posts(
    db: AsyncSession,
    page: int = 1,
    limit: int = 10,
    status: Optional[str] = None,
    featured: Optional[bool] = None,
) -> Tuple[List[BlogPostEntity], Pagination]:
    return await paginate(BlogPostRepository(db), page, limit, status=status, featured=featured)


async def list_featured_posts(db: AsyncSession) -> List[BlogPostEntity]:
    return await BlogPostRepository(db).find_all(
        ListFilters(featured=True, status="published", limit=FEATURED_LIMIT)
    )


async def list_published_posts(db: AsyncSession, page: int = 1, limit: int = 10):
    return await paginate(BlogPostRepository(db), page, limit, status="published")


async def get_post(db: AsyncSession, post_id: str, published_only: bool = False) -> BlogPostEntity:
    post = await BlogPostRepository(db).find_by_id(post_id)
    if post is None or (published_only and post.status != "published"):
        raise NotFoundError("Blog post not found")
    return post


async def create_post(db: AsyncSession, data: Mapping[str, Any]) -> BlogPostEntity:
    data = dict(data)
    for field in ("title", "excerpt", "content"):
        if not (data.get(field) or "").strip():
            raise ValidationError("Title, excerpt, and content are required")
    if not (data.get("author") or "").strip():
        raise ValidationError("Author is required")
    seo = data.get("seo") or {}
    if not seo.get("metaTitle") or not seo.get("metaDescription"):
        raise ValidationError("SEO meta title and description are required")

    if not data.get("read_time"):
        data["read_time"] = calculate_read_time(data["content"])
    data["published_at"] = naive_utc(data.get("published_at")) or utcnow()

    post = await BlogPostRepository(db).create(data)
    logger.info("Blog post created: %s", post.id)
    return post


async def update_post(db: AsyncSession, post_id: str, patch: Dict[str, Any]) -> BlogPostEntity:
    repo = BlogPostRepository(db)
    existing = await repo.find_by_id(post_id)
    if existing is None:
        raise NotFoundError("Blog post not found")

    patch = dict(patch)
    if "published_at" in patch:
        patch["published_at"] = naive_utc(patch["published_at"])
    if "content" in patch:
        patch["read_time"] = calculate_read_time(patch["content"])
    if "seo" in patch:
        # partial SEO edits merge into the stored block
        merged = existing.seo.model_dump(by_alias=True)
        merged.update(patch["seo"])
        patch["seo"] = merged

    post = await repo.update(post_id, patch)
    if post is None:
        raise NotFoundError("Blog post not found")
    return post


async def delete_post(db: AsyncSession, post_id: str) -> None:
    if not await BlogPostRepository(db).delete(post_id):
        raise NotFoundError("Blog post not found")
    logger.info("Blog post deleted: %s", post_id)


async def get_blog_stats(db: AsyncSession) -> dict:
    return await status_stats(BlogPostRepository(db))
