"""
Models package
"""

from .user import User
from .project import Project
from .blog_post import BlogPost
from .testimonial import Testimonial
from .site_settings import SiteSettings, SETTINGS_ID

__all__ = [
    "User",
    "Project",
    "BlogPost",
    "Testimonial",
    "SiteSettings",
    "SETTINGS_ID",
]
