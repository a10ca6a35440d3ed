"""
Helpers shared by the content services
"""

from typing import Any, List, Tuple

from portfolio_api.repositories.base import BaseRepository
from portfolio_api.schemas.common import ListFilters, Pagination


async def paginate(repo: BaseRepository, page: int, limit: int, **filters: Any) -> Tuple[List[Any], Pagination]:
    """One page of ``repo`` plus the matching total"""
    items = await repo.find_all(ListFilters.page(page, limit, **filters))
    total = await repo.count(ListFilters(**filters))
    return items, Pagination.build(page, limit, total)


async def status_stats(repo: BaseRepository) -> dict:
    """Counts by status and featured flag, one query each"""
    return {
        "total": await repo.count(),
        "published": await repo.count(ListFilters(status="published")),
        "draft": await repo.count(ListFilters(status="draft")),
        "featured": await repo.count(ListFilters(featured=True)),
    }
