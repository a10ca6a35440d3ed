"""
User Pydantic schemas
"""

from pydantic import EmailStr, Field
from typing import Optional

from portfolio_api.schemas.common import CamelModel, InputModel, PatchModel, Role, UtcDatetime


class UserCreate(InputModel):
    """User creation request (admin only)"""
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    role: Role = "editor"


class UserUpdate(PatchModel):
    """User partial update request"""
    non_nullable = frozenset({"username", "email", "password", "role", "is_active"})

    username: Optional[str] = Field(None, min_length=3, max_length=50)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6, max_length=128)
    role: Optional[Role] = None
    is_active: Optional[bool] = None


class UserPublic(CamelModel):
    """User as returned to clients; never carries the password"""
    id: str
    username: str
    email: str
    role: Role
    created_at: UtcDatetime
    last_login: Optional[UtcDatetime] = None
    is_active: bool


class UserRecord(UserPublic):
    """Internal form including the password hash"""
    password: str = Field(..., exclude=True, repr=False)
