"""
Site settings rules

Each section is merged key-by-key into the stored section; sections that
are not mentioned are left alone.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, List, Mapping
import copy
import logging

from portfolio_api.core.errors import NotFoundError, ValidationError
from portfolio_api.repositories.settings import SiteSettingsRepository
from portfolio_api.schemas.settings import SECTIONS, SiteSettingsEntity

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "general": {
        "siteName": "Portfolio",
        "tagline": "Building the Future",
        "description": "A modern portfolio showcasing innovative projects and expertise",
        "logo": "",
        "favicon": "",
    },
    "contact": {
        "email": "contact@portfolio.com",
        "phone": "",
        "location": "",
        "socialLinks": {
            "github": "https://github.com",
            "linkedin": "https://linkedin.com",
            "twitter": "https://twitter.com",
        },
    },
    "theme": {
        "primaryColor": "#3b82f6",
        "secondaryColor": "#8b5cf6",
        "accentColor": "#06b6d4",
        "darkMode": True,
    },
    "layout": {
        "sections": [
            {"id": "hero", "name": "Hero", "enabled": True, "order": 1},
            {"id": "about", "name": "About", "enabled": True, "order": 2},
            {"id": "projects", "name": "Projects", "enabled": True, "order": 3},
            {"id": "experience", "name": "Experience", "enabled": True, "order": 4},
            {"id": "testimonials", "name": "Testimonials", "enabled": True, "order": 5},
            {"id": "contact", "name": "Contact", "enabled": True, "order": 6},
        ],
        "containerWidth": "normal",
        "spacing": "normal",
        "borderRadius": "medium",
    },
    "seo": {
        "defaultTitle": "Portfolio | Building the Future",
        "defaultDescription": "A modern portfolio showcasing innovative projects and expertise",
        "defaultKeywords": ["portfolio", "developer", "projects", "web development"],
        "ogImage": "",
        "twitterCard": "summary_large_image",
        "structuredData": {},
    },
}


async def ensure_settings(db: AsyncSession) -> bool:
    """Create the default row if missing. Returns True when created."""
    repo = SiteSettingsRepository(db)
    if await repo.get() is not None:
        return False
    await repo.create(copy.deepcopy(DEFAULT_SETTINGS))
    logger.info("Default site settings created")
    return True


async def get_or_create_settings(db: AsyncSession) -> SiteSettingsEntity:
    repo = SiteSettingsRepository(db)
    settings = await repo.get()
    if settings is None:
        settings = await repo.create(copy.deepcopy(DEFAULT_SETTINGS))
        logger.info("Default site settings created on read")
    return settings


async def update_settings(db: AsyncSession, sections: Mapping[str, Dict[str, Any]]) -> SiteSettingsEntity:
    current = await get_or_create_settings(db)
    merged = {}
    for name, values in sections.items():
        if name not in SECTIONS:
            raise ValidationError(f"Unknown settings section: {name}")
        section = dict(getattr(current, name))
        section.update(values)
        merged[name] = section

    updated = await SiteSettingsRepository(db).update(merged)
    if updated is None:
        raise NotFoundError("Site settings not found")
    return updated


async def update_section(db: AsyncSession, name: str, values: Dict[str, Any]) -> SiteSettingsEntity:
    return await update_settings(db, {name: values})


def _sorted_sections(layout: Mapping[str, Any]) -> List[Dict[str, Any]]:
    sections = [dict(s) for s in layout.get("sections") or []]
    return sorted(sections, key=lambda s: s.get("order", 0))


def reorder_sections(layout: Mapping[str, Any], ordered_ids: List[str]) -> Dict[str, Any]:
    """Put the given section ids first, in order; the rest keep their relative order.

    ``order`` is renumbered 1..n.
    """
    sections = _sorted_sections(layout)
    by_id = {s["id"]: s for s in sections}
    unknown = [i for i in ordered_ids if i not in by_id]
    if unknown:
        raise ValidationError(f"Unknown layout sections: {', '.join(unknown)}")
    if len(set(ordered_ids)) != len(ordered_ids):
        raise ValidationError("Duplicate layout section ids")

    head = [by_id[i] for i in ordered_ids]
    tail = [s for s in sections if s["id"] not in set(ordered_ids)]
    for position, section in enumerate(head + tail, start=1):
        section["order"] = position

    result = dict(layout)
    result["sections"] = head + tail
    return result


def toggle_section(layout: Mapping[str, Any], section_id: str) -> Dict[str, Any]:
    """Flip ``enabled`` on one section"""
    sections = _sorted_sections(layout)
    for section in sections:
        if section["id"] == section_id:
            section["enabled"] = not section.get("enabled", True)
            break
    else:
        raise NotFoundError("Layout section not found")

    result = dict(layout)
    result["sections"] = sections
    return result


async def reorder_layout(db: AsyncSession, ordered_ids: List[str]) -> SiteSettingsEntity:
    current = await get_or_create_settings(db)
    return await update_section(db, "layout", reorder_sections(current.layout, ordered_ids))


async def toggle_layout_section(db: AsyncSession, section_id: str) -> SiteSettingsEntity:
    current = await get_or_create_settings(db)
    return await update_section(db, "layout", toggle_section(current.layout, section_id))
