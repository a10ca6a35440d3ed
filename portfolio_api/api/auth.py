"""
Auth API router
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.config import Settings
from portfolio_api.core.database import get_db
from portfolio_api.core.responses import success
from portfolio_api.core.security import get_current_user, get_settings
from portfolio_api.schemas.auth import ChangePasswordRequest, LoginRequest
from portfolio_api.schemas.user import UserPublic
from portfolio_api.services import user_service

router = APIRouter()


@router.post("/login")
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
    cfg: Settings = Depends(get_settings),
):
    result = await user_service.authenticate(db, payload.username, payload.password, cfg)
    return success(result, message="Login successful")


@router.post("/logout")
async def logout(current_user: UserPublic = Depends(get_current_user)):
    """Tokens are stateless; the client drops its copy"""
    return success(message="Logout successful")


@router.get("/profile")
async def get_profile(current_user: UserPublic = Depends(get_current_user)):
    return success(current_user)


@router.post("/change-password")
async def change_password(
    payload: ChangePasswordRequest,
    db: AsyncSession = Depends(get_db),
    current_user: UserPublic = Depends(get_current_user),
):
    await user_service.change_password(db, current_user, payload.current_password, payload.new_password)
    return success(message="Password changed successfully")
