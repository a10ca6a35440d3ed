"""
Auth Pydantic schemas
"""

from pydantic import Field

from portfolio_api.schemas.common import CamelModel, InputModel
from portfolio_api.schemas.user import UserPublic


class LoginRequest(InputModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResult(CamelModel):
    user: UserPublic
    token: str


class ChangePasswordRequest(InputModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=128)
