"""
Blog post gateway
"""

from typing import Any, Dict, Tuple

from portfolio_api.models.blog_post import BlogPost
from portfolio_api.repositories.base import BaseRepository
from portfolio_api.schemas.blog import BlogPostEntity


class BlogPostRepository(BaseRepository[BlogPostEntity]):
    model = BlogPost
    entity = BlogPostEntity
    column_map = {"seo": "seo_data"}

    def _ordering(self) -> Tuple[Any, ...]:
        return (
            BlogPost.published_at.desc(),
            BlogPost.created_at.desc(),
            BlogPost.id.desc(),
        )

    def _row_data(self, row: Any) -> Dict[str, Any]:
        data = super()._row_data(row)
        seo = data.get("seo")
        if not isinstance(seo, dict):
            # rows written without SEO data fall back to title/excerpt
            data["seo"] = {
                "metaTitle": row.title,
                "metaDescription": row.excerpt,
                "keywords": [],
            }
        return data

    def _defaults(self) -> Dict[str, Any]:
        return {"tags": []}
