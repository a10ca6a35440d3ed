"""
Database seeding and maintenance
"""

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from portfolio_api.core.config import Settings
from portfolio_api.core.database import Store
from portfolio_api.models import BlogPost, Project, SiteSettings, Testimonial, User
from portfolio_api.repositories.users import UserRepository
from portfolio_api.services.settings_service import ensure_settings

logger = logging.getLogger(__name__)

CONTENT_MODELS = (Project, BlogPost, Testimonial)


async def seed_database(db: AsyncSession, cfg: Settings) -> None:
    """Create the admin account and the settings row when missing"""
    repo = UserRepository(db)
    if await repo.find_by_username(cfg.ADMIN_USERNAME) is None:
        await repo.create({
            "username": cfg.ADMIN_USERNAME,
            "email": cfg.ADMIN_EMAIL,
            "password": cfg.ADMIN_PASSWORD,
            "role": "admin",
        })
        logger.info("Admin user %s created", cfg.ADMIN_USERNAME)

    await ensure_settings(db)


async def clear_content(store: Store) -> None:
    """Delete projects, posts and testimonials; users and settings stay"""
    async with store.session() as db:
        for model in CONTENT_MODELS:
            await db.execute(delete(model))
        await db.commit()
    logger.info("Content tables cleared")


async def reset_database(store: Store) -> None:
    """Empty every table, then seed the admin and default settings again"""
    async with store.session() as db:
        for model in CONTENT_MODELS + (User, SiteSettings):
            await db.execute(delete(model))
        await db.commit()
        await seed_database(db, store.settings)
    logger.info("Database reset")
