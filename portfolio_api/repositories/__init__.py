"""
Entity gateways
"""

from .projects import ProjectRepository
from .blog_posts import BlogPostRepository
from .testimonials import TestimonialRepository
from .users import UserRepository
from .settings import SiteSettingsRepository

__all__ = [
    "ProjectRepository",
    "BlogPostRepository",
    "TestimonialRepository",
    "UserRepository",
    "SiteSettingsRepository",
]
