"""
Schemas package
"""

from .common import ListFilters, Pagination
from .user import UserCreate, UserUpdate, UserPublic, UserRecord
from .auth import LoginRequest, LoginResult, ChangePasswordRequest
from .project import ProjectCreate, ProjectUpdate, ProjectEntity
from .blog import BlogPostCreate, BlogPostUpdate, BlogPostEntity
from .testimonial import TestimonialCreate, TestimonialUpdate, TestimonialEntity
from .settings import SiteSettingsUpdate, SiteSettingsEntity, SeoCheckRequest, SeoReport

__all__ = [
    "ListFilters",
    "Pagination",
    "UserCreate",
    "UserUpdate",
    "UserPublic",
    "UserRecord",
    "LoginRequest",
    "LoginResult",
    "ChangePasswordRequest",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectEntity",
    "BlogPostCreate",
    "BlogPostUpdate",
    "BlogPostEntity",
    "TestimonialCreate",
    "TestimonialUpdate",
    "TestimonialEntity",
    "SiteSettingsUpdate",
    "SiteSettingsEntity",
    "SeoCheckRequest",
    "SeoReport",
]
