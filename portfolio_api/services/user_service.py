"""
User management and login
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, List, Mapping, Optional
import logging

from portfolio_api.core.config import Settings
from portfolio_api.core.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from portfolio_api.core.security import create_access_token, get_password_hash, verify_password
from portfolio_api.repositories.users import UserRepository
from portfolio_api.schemas.auth import LoginResult
from portfolio_api.schemas.user import UserPublic

logger = logging.getLogger(__name__)

_dummy_hash: Optional[str] = None


def _timing_dummy_hash() -> str:
    # unknown usernames still pay for one hash verification
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = get_password_hash("not-a-real-password")
    return _dummy_hash


def can_delete(actor: UserPublic, target: UserPublic) -> bool:
    """Admins and the acting account itself are never deletable"""
    if target.role == "admin":
        return False
    if actor.id == target.id:
        return False
    return True


async def list_users(db: AsyncSession) -> List[UserPublic]:
    return await UserRepository(db).find_all()


async def get_user(db: AsyncSession, user_id: str) -> UserPublic:
    user = await UserRepository(db).find_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


async def _ensure_unique(repo: UserRepository, data: Mapping[str, Any], exclude_id: Optional[str] = None) -> None:
    username = data.get("username")
    if username:
        existing = await repo.find_by_username(username)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Username already exists")
    email = data.get("email")
    if email:
        existing = await repo.find_by_email(email)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Email already exists")


async def create_user(db: AsyncSession, data: Mapping[str, Any]) -> UserPublic:
    repo = UserRepository(db)
    await _ensure_unique(repo, data)
    user = await repo.create(data)
    logger.info("User created: %s (%s)", user.username, user.role)
    return user


async def update_user(db: AsyncSession, user_id: str, patch: Dict[str, Any]) -> UserPublic:
    repo = UserRepository(db)
    if await repo.find_by_id(user_id) is None:
        raise NotFoundError("User not found")
    await _ensure_unique(repo, patch, exclude_id=user_id)

    user = await repo.update(user_id, patch)
    if user is None:
        raise NotFoundError("User not found")
    return user


async def delete_user(db: AsyncSession, actor: UserPublic, user_id: str) -> None:
    repo = UserRepository(db)
    target = await repo.find_by_id(user_id)
    if target is None:
        raise NotFoundError("User not found")
    if not can_delete(actor, target):
        if target.role == "admin":
            raise ValidationError("Cannot delete admin user")
        raise ValidationError("Cannot delete your own account")

    if not await repo.delete(user_id):
        raise NotFoundError("User not found")
    logger.info("User deleted: %s by %s", target.username, actor.username)


async def authenticate(db: AsyncSession, username: str, password: str, cfg: Settings) -> LoginResult:
    """Verify credentials and issue a token.

    Unknown, inactive and wrong-password logins all get the same error.
    """
    repo = UserRepository(db)
    record = await repo.find_by_username(username)
    if record is None or not record.is_active:
        verify_password(password, _timing_dummy_hash())
        raise AuthenticationError("Invalid credentials")
    if not verify_password(password, record.password):
        raise AuthenticationError("Invalid credentials")

    await repo.touch_last_login(record.id)
    user = await repo.find_by_id(record.id)
    token = create_access_token(record.id, cfg)
    logger.info("Login: %s", record.username)
    return LoginResult(user=user, token=token)


async def change_password(db: AsyncSession, user: UserPublic, current_password: str, new_password: str) -> None:
    repo = UserRepository(db)
    record = await repo.find_by_username(user.username)
    if record is None:
        raise NotFoundError("User not found")
    if not verify_password(current_password, record.password):
        raise ValidationError("Current password is incorrect")
    await repo.update(record.id, {"password": new_password})
