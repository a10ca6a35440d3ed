"""
Site settings API router
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.database import get_db
from portfolio_api.core.responses import success
from portfolio_api.core.security import require_editor
from portfolio_api.schemas.settings import (
    ContactSettings,
    GeneralSettings,
    LayoutOrderRequest,
    LayoutSettings,
    SeoCheckRequest,
    SeoSettings,
    SiteSettingsUpdate,
    ThemeSettings,
)
from portfolio_api.schemas.user import UserPublic
from portfolio_api.services import seo_service, settings_service

router = APIRouter()


@router.get("")
async def get_settings(db: AsyncSession = Depends(get_db)):
    """Public; creates the default row on first read"""
    return success(await settings_service.get_or_create_settings(db))


@router.put("")
async def update_settings(
    payload: SiteSettingsUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    settings = await settings_service.update_settings(db, payload.to_sections())
    return success(settings, message="Site settings updated successfully")


@router.put("/general")
async def update_general_settings(
    payload: GeneralSettings,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    settings = await settings_service.update_section(db, "general", payload.to_section())
    return success(settings, message="General settings updated successfully")


@router.put("/contact")
async def update_contact_settings(
    payload: ContactSettings,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    settings = await settings_service.update_section(db, "contact", payload.to_section())
    return success(settings, message="Contact settings updated successfully")


@router.put("/theme")
async def update_theme_settings(
    payload: ThemeSettings,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    settings = await settings_service.update_section(db, "theme", payload.to_section())
    return success(settings, message="Theme settings updated successfully")


@router.put("/layout/order")
async def reorder_layout_sections(
    payload: LayoutOrderRequest,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    settings = await settings_service.reorder_layout(db, payload.section_ids)
    return success(settings, message="Layout sections reordered successfully")


@router.post("/layout/sections/{section_id}/toggle")
async def toggle_layout_section(
    section_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    settings = await settings_service.toggle_layout_section(db, section_id)
    return success(settings, message="Layout section toggled successfully")


@router.put("/layout")
async def update_layout_settings(
    payload: LayoutSettings,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    settings = await settings_service.update_section(db, "layout", payload.to_section())
    return success(settings, message="Layout settings updated successfully")


@router.put("/seo")
async def update_seo_settings(
    payload: SeoSettings,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_editor),
):
    settings = await settings_service.update_section(db, "seo", payload.to_section())
    return success(settings, message="SEO settings updated successfully")


@router.post("/seo/analyze")
async def analyze_seo(
    payload: SeoCheckRequest,
    current_user: UserPublic = Depends(require_editor),
):
    return success(seo_service.score_seo(payload))
