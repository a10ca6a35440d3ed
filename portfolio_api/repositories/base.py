"""
Generic entity gateway

Subclasses declare the ORM model, the entity schema used to decode rows,
their ordering and which filters they honour. Every content table shares
the same find/count/create/update/delete contract.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Generic, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError
from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.database import Base, generate_id, utcnow
from portfolio_api.core.errors import InternalError, RowDecodeError
from portfolio_api.schemas.common import ListFilters

E = TypeVar("E", bound=BaseModel)


class BaseRepository(Generic[E]):
    model: ClassVar[Type[Base]]
    entity: ClassVar[Type[BaseModel]]
    filter_fields: ClassVar[Tuple[str, ...]] = ("status", "featured")
    # entity field -> column, for the few that differ
    column_map: ClassVar[Dict[str, str]] = {}

    def __init__(self, db: AsyncSession):
        self.db = db

    # -- row <-> entity -------------------------------------------------

    @classmethod
    def _columns(cls) -> List[str]:
        return [c.key for c in cls.model.__table__.columns]

    def _row_data(self, row: Any) -> Dict[str, Any]:
        reverse = {column: field for field, column in self.column_map.items()}
        return {reverse.get(name, name): getattr(row, name) for name in self._columns()}

    def _decode(self, row: Any) -> E:
        try:
            return self.entity.model_validate(self._row_data(row))
        except PydanticValidationError as e:
            raise RowDecodeError(self.model.__tablename__, getattr(row, "id", None), str(e)) from e

    def _to_columns(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        columns = set(self._columns())
        values = {}
        for field, value in data.items():
            column = self.column_map.get(field, field)
            if column not in columns:
                raise KeyError(f"{self.model.__tablename__} has no column for {field!r}")
            values[column] = value
        return values

    # -- queries --------------------------------------------------------

    def _ordering(self) -> Tuple[Any, ...]:
        return (self.model.created_at.desc(), self.model.id.desc())

    def _apply_filters(self, stmt: Select, filters: ListFilters) -> Select:
        for name in self.filter_fields:
            value = getattr(filters, name)
            if value is not None:
                stmt = stmt.where(getattr(self.model, name) == value)
        return stmt

    async def find_all(self, filters: Optional[ListFilters] = None) -> List[E]:
        """Filtered, ordered listing.

        ``offset`` is honoured on its own; SQLite gets ``LIMIT -1`` when no
        limit is set.
        """
        filters = filters or ListFilters()
        stmt = self._apply_filters(select(self.model), filters).order_by(*self._ordering())
        if filters.limit:
            stmt = stmt.limit(filters.limit)
        if filters.offset:
            stmt = stmt.offset(filters.offset)
        result = await self.db.execute(stmt.execution_options(populate_existing=True))
        return [self._decode(row) for row in result.scalars().all()]

    async def find_by_id(self, entity_id: str) -> Optional[E]:
        row = await self._get_row(entity_id)
        return self._decode(row) if row is not None else None

    async def _get_row(self, entity_id: str):
        stmt = (
            select(self.model)
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def count(self, filters: Optional[ListFilters] = None) -> int:
        filters = (filters or ListFilters()).without_paging()
        stmt = self._apply_filters(select(func.count()).select_from(self.model), filters)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    # -- writes ---------------------------------------------------------

    def _defaults(self) -> Dict[str, Any]:
        return {}

    async def create(self, data: Mapping[str, Any]) -> E:
        """Insert and return the row as re-read from the store"""
        values = self._defaults()
        values.update({k: v for k, v in data.items() if v is not None})
        values = self._to_columns(values)

        now = utcnow()
        columns = set(self._columns())
        values["id"] = generate_id()
        if "created_at" in columns:
            values["created_at"] = now
        if "updated_at" in columns:
            values["updated_at"] = now

        row = self.model(**values)
        self.db.add(row)
        await self.db.commit()

        created = await self.find_by_id(values["id"])
        if created is None:
            raise InternalError(f"Failed to create {self.model.__tablename__} row")
        return created

    async def update(self, entity_id: str, patch: Mapping[str, Any]) -> Optional[E]:
        """Apply a partial update.

        Only keys present in ``patch`` are written. An empty patch returns the
        current entity without touching ``updated_at``.
        """
        if not patch:
            return await self.find_by_id(entity_id)

        values = self._to_columns(patch)
        if "updated_at" in self._columns():
            values["updated_at"] = utcnow()

        stmt = (
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        if result.rowcount == 0:
            return None
        return await self.find_by_id(entity_id)

    async def delete(self, entity_id: str) -> bool:
        stmt = (
            delete(self.model)
            .where(self.model.id == entity_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        return (result.rowcount or 0) > 0
