"""
Security utilities: password hashing, tokens, auth dependencies
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.config import Settings
from portfolio_api.core.database import get_db
from portfolio_api.core.errors import AuthenticationError, AuthorizationError
from portfolio_api.schemas.user import UserPublic


pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# a missing header is reported by get_current_user
security = HTTPBearer(auto_error=False)

ROLE_RANK = {"viewer": 1, "editor": 2, "admin": 3}


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time password check"""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(user_id: str, cfg: Settings, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a signed, time-limited token for the user"""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or cfg.token_ttl)
    to_encode = {"userId": user_id, "iat": now, "exp": expire}
    return jwt.encode(to_encode, cfg.JWT_SECRET, algorithm=cfg.JWT_ALGORITHM)


def verify_token(token: str, cfg: Settings) -> Optional[dict]:
    """Decode a token; None if the signature or expiry is invalid"""
    try:
        payload = jwt.decode(token, cfg.JWT_SECRET, algorithms=[cfg.JWT_ALGORITHM])
    except JWTError:
        return None
    if not payload.get("userId"):
        return None
    return payload


def has_role(user: UserPublic, minimum: str) -> bool:
    return ROLE_RANK.get(user.role, 0) >= ROLE_RANK[minimum]


def get_settings(request: Request) -> Settings:
    """Settings dependency"""
    return request.app.state.settings


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> UserPublic:
    """Resolve the bearer token to an active user"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required")

    payload = verify_token(credentials.credentials, get_settings(request))
    if payload is None:
        raise AuthenticationError("Invalid or expired token", status_code=403)

    # imported here to avoid a circular import with the repositories
    from portfolio_api.repositories.users import UserRepository

    user = await UserRepository(db).find_by_id(payload["userId"])
    if user is None or not user.is_active:
        raise AuthenticationError("Invalid or inactive user")
    return user


async def require_editor(current_user: UserPublic = Depends(get_current_user)) -> UserPublic:
    if not has_role(current_user, "editor"):
        raise AuthorizationError("Editor access required")
    return current_user


async def require_admin(current_user: UserPublic = Depends(get_current_user)) -> UserPublic:
    if not has_role(current_user, "admin"):
        raise AuthorizationError("Admin access required")
    return current_user
