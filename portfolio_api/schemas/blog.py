"""
Blog post Pydantic schemas
"""

from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime

from portfolio_api.schemas.common import (
    CamelModel,
    ContentStatus,
    InputModel,
    PatchModel,
    UtcDatetime,
    blank_to_none,
)


def _check_tags(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return None
    cleaned = [t.strip() for t in value]
    if any(not t for t in cleaned):
        raise ValueError("Tag names cannot be empty")
    return cleaned


class SeoMeta(InputModel):
    meta_title: str = Field(..., min_length=1, max_length=100)
    meta_description: str = Field(..., min_length=1, max_length=200)
    keywords: List[str] = []


class SeoMetaUpdate(InputModel):
    meta_title: Optional[str] = Field(None, min_length=1, max_length=100)
    meta_description: Optional[str] = Field(None, min_length=1, max_length=200)
    keywords: Optional[List[str]] = None


class _BlogRules(InputModel):
    @field_validator("image", mode="before", check_fields=False)
    @classmethod
    def blank_image(cls, v):
        return blank_to_none(v)

    @field_validator("tags", check_fields=False)
    @classmethod
    def non_empty_tags(cls, v):
        return _check_tags(v)


class BlogPostCreate(_BlogRules):
    """Blog post creation request"""
    title: str = Field(..., min_length=1, max_length=200)
    excerpt: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1, max_length=100)
    published_at: Optional[datetime] = None
    status: ContentStatus = "draft"
    featured: bool = False
    tags: List[str] = []
    read_time: Optional[int] = Field(None, ge=1, le=120)
    image: Optional[str] = None
    seo: SeoMeta


class BlogPostUpdate(_BlogRules, PatchModel):
    """Blog post partial update request"""
    non_nullable = frozenset({"title", "excerpt", "content", "author", "status", "featured", "tags", "seo"})

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    excerpt: Optional[str] = Field(None, min_length=1, max_length=500)
    content: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, min_length=1, max_length=100)
    published_at: Optional[datetime] = None
    status: Optional[ContentStatus] = None
    featured: Optional[bool] = None
    tags: Optional[List[str]] = None
    read_time: Optional[int] = Field(None, ge=1, le=120)
    image: Optional[str] = None
    seo: Optional[SeoMetaUpdate] = None


class SeoData(CamelModel):
    meta_title: str
    meta_description: str
    keywords: List[str] = []


class BlogPostEntity(CamelModel):
    """Blog post as stored and returned"""
    id: str
    title: str
    excerpt: str
    content: str
    author: str
    published_at: Optional[UtcDatetime] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime
    status: ContentStatus
    featured: bool
    tags: List[str] = []
    read_time: int
    image: Optional[str] = None
    seo: SeoData

    @field_validator("tags", mode="before")
    @classmethod
    def missing_list(cls, v):
        return v if isinstance(v, list) else []
