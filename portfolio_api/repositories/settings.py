"""
Site settings gateway (single row, id "main")
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.database import utcnow
from portfolio_api.core.errors import InternalError, RowDecodeError
from portfolio_api.models.site_settings import SiteSettings, SETTINGS_ID
from portfolio_api.schemas.settings import SECTIONS, SiteSettingsEntity


def _column(section: str) -> str:
    return f"{section}_settings"


class SiteSettingsRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _decode(self, row: SiteSettings) -> SiteSettingsEntity:
        data = {"id": row.id, "updated_at": row.updated_at}
        for section in SECTIONS:
            data[section] = getattr(row, _column(section))
        try:
            return SiteSettingsEntity.model_validate(data)
        except PydanticValidationError as e:
            raise RowDecodeError(SiteSettings.__tablename__, row.id, str(e)) from e

    async def get(self) -> Optional[SiteSettingsEntity]:
        stmt = (
            select(SiteSettings)
            .where(SiteSettings.id == SETTINGS_ID)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        row = result.scalar_one_or_none()
        return self._decode(row) if row is not None else None

    async def create(self, sections: Mapping[str, Dict[str, Any]]) -> SiteSettingsEntity:
        row = SiteSettings(id=SETTINGS_ID, updated_at=utcnow())
        for section in SECTIONS:
            setattr(row, _column(section), dict(sections.get(section) or {}))
        self.db.add(row)
        await self.db.commit()
        created = await self.get()
        if created is None:
            raise InternalError("Failed to create site settings")
        return created

    async def update(self, sections: Mapping[str, Dict[str, Any]]) -> Optional[SiteSettingsEntity]:
        """Replace only the given sections"""
        values = {_column(name): value for name, value in sections.items() if name in SECTIONS}
        if not values:
            return await self.get()
        values["updated_at"] = utcnow()
        result = await self.db.execute(
            update(SiteSettings)
            .where(SiteSettings.id == SETTINGS_ID)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        if result.rowcount == 0:
            return None
        return await self.get()
