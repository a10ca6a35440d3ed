"""
Project Pydantic schemas
"""

from pydantic import Field, field_validator
from typing import List, Optional

from portfolio_api.schemas.common import (
    CamelModel,
    ContentStatus,
    InputModel,
    PatchModel,
    UtcDatetime,
    blank_to_none,
    check_url,
)


class Collaborator(CamelModel):
    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    avatar: Optional[str] = None


class Metrics(CamelModel):
    views: int = Field(0, ge=0)
    likes: int = Field(0, ge=0)
    shares: int = Field(0, ge=0)


Technologies = List[str]


def _check_technologies(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return None
    cleaned = [t.strip() for t in value]
    if not cleaned:
        raise ValueError("At least one technology is required")
    if any(not t for t in cleaned):
        raise ValueError("Technology names cannot be empty")
    return cleaned


class _ProjectRules(InputModel):
    @field_validator("github_url", "live_url", "long_description", mode="before", check_fields=False)
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)

    @field_validator("github_url", "live_url", check_fields=False)
    @classmethod
    def valid_url(cls, v):
        return check_url(v)

    @field_validator("technologies", check_fields=False)
    @classmethod
    def non_empty_technologies(cls, v):
        return _check_technologies(v)


class ProjectCreate(_ProjectRules):
    """Project creation request"""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=500)
    long_description: Optional[str] = Field(None, max_length=5000)
    technologies: Technologies
    image: str = Field(..., min_length=1)
    gallery: Optional[List[str]] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    status: ContentStatus = "draft"
    featured: bool = False
    collaborators: Optional[List[Collaborator]] = None
    metrics: Optional[Metrics] = None


class ProjectUpdate(_ProjectRules, PatchModel):
    """Project partial update request"""
    non_nullable = frozenset({"title", "description", "technologies", "image", "status", "featured"})

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    long_description: Optional[str] = Field(None, max_length=5000)
    technologies: Optional[Technologies] = None
    image: Optional[str] = Field(None, min_length=1)
    gallery: Optional[List[str]] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    status: Optional[ContentStatus] = None
    featured: Optional[bool] = None
    collaborators: Optional[List[Collaborator]] = None
    metrics: Optional[Metrics] = None


class ProjectEntity(CamelModel):
    """Project as stored and returned"""
    id: str
    title: str
    description: str
    long_description: Optional[str] = None
    technologies: List[str] = []
    image: Optional[str] = None
    gallery: Optional[List[str]] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    status: ContentStatus
    featured: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime
    collaborators: Optional[List[Collaborator]] = None
    metrics: Optional[Metrics] = None

    @field_validator("technologies", mode="before")
    @classmethod
    def missing_list(cls, v):
        return [] if v is None else v

    @field_validator("gallery", "collaborators", "metrics", mode="before")
    @classmethod
    def corrupt_to_none(cls, v):
        # JSON text that decoded to the wrong shape reads as absent
        if v is not None and not isinstance(v, (list, dict)):
            return None
        return v
