"""
User management API router (admin only)
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.database import get_db
from portfolio_api.core.responses import success
from portfolio_api.core.security import require_admin
from portfolio_api.schemas.user import UserCreate, UserPublic, UserUpdate
from portfolio_api.services import user_service

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("")
async def get_users(db: AsyncSession = Depends(get_db)):
    return success(await user_service.list_users(db))


@router.get("/{user_id}")
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    return success(await user_service.get_user(db, user_id))


@router.post("", status_code=201)
async def create_user(payload: UserCreate, db: AsyncSession = Depends(get_db)):
    user = await user_service.create_user(db, payload.to_data())
    return success(user, message="User created successfully", status_code=201)


@router.put("/{user_id}")
async def update_user(user_id: str, payload: UserUpdate, db: AsyncSession = Depends(get_db)):
    user = await user_service.update_user(db, user_id, payload.to_patch())
    return success(user, message="User updated successfully")


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(require_admin),
):
    await user_service.delete_user(db, current_user, user_id)
    return success(message="User deleted successfully")
