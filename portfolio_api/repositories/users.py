"""
User gateway

Listing and lookup by id return ``UserPublic``; only the username/email
lookups used for login and uniqueness checks expose the password hash.
"""

from typing import Any, Mapping, Optional

from sqlalchemy import select, update

from portfolio_api.core.database import utcnow
from portfolio_api.core.security import get_password_hash
from portfolio_api.models.user import User
from portfolio_api.repositories.base import BaseRepository
from portfolio_api.schemas.user import UserPublic, UserRecord


class UserRepository(BaseRepository[UserPublic]):
    model = User
    entity = UserPublic
    filter_fields = ()

    async def _find_record(self, column, value) -> Optional[UserRecord]:
        stmt = select(User).where(column == value).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return UserRecord.model_validate(self._row_data(row))

    async def find_by_username(self, username: str) -> Optional[UserRecord]:
        return await self._find_record(User.username, username)

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        return await self._find_record(User.email, email)

    async def create(self, data: Mapping[str, Any]) -> UserPublic:
        values = dict(data)
        values["password"] = get_password_hash(values["password"])
        values.setdefault("is_active", True)
        return await super().create(values)

    async def update(self, entity_id: str, patch: Mapping[str, Any]) -> Optional[UserPublic]:
        values = dict(patch)
        if values.get("password") is not None:
            values["password"] = get_password_hash(values["password"])
        return await super().update(entity_id, values)

    async def touch_last_login(self, user_id: str) -> None:
        await self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(last_login=utcnow())
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
