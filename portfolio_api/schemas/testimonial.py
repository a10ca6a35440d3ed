"""
Testimonial Pydantic schemas
"""

from pydantic import Field, field_validator
from typing import Optional

from portfolio_api.schemas.common import CamelModel, InputModel, PatchModel, UtcDatetime, blank_to_none


class TestimonialCreate(InputModel):
    """Testimonial creation request"""
    name: str = Field(..., min_length=1, max_length=100)
    role: str = Field(..., min_length=1, max_length=100)
    company: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1, max_length=1000)
    rating: int = Field(5, ge=1, le=5)
    avatar: Optional[str] = None
    featured: bool = False
    approved: bool = False

    @field_validator("avatar", mode="before")
    @classmethod
    def blank_avatar(cls, v):
        return blank_to_none(v)


class TestimonialUpdate(PatchModel):
    """Testimonial partial update request"""
    non_nullable = frozenset({"name", "role", "company", "content", "rating", "featured", "approved"})

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[str] = Field(None, min_length=1, max_length=100)
    company: Optional[str] = Field(None, min_length=1, max_length=100)
    content: Optional[str] = Field(None, min_length=1, max_length=1000)
    rating: Optional[int] = Field(None, ge=1, le=5)
    avatar: Optional[str] = None
    featured: Optional[bool] = None
    approved: Optional[bool] = None

    @field_validator("avatar", mode="before")
    @classmethod
    def blank_avatar(cls, v):
        return blank_to_none(v)


class TestimonialEntity(CamelModel):
    id: str
    name: str
    role: str
    company: str
    content: str
    rating: int = Field(..., ge=1, le=5)
    avatar: Optional[str] = None
    featured: bool
    approved: bool
    created_at: UtcDatetime
