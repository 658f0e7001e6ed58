"""
User DTO
========

Pydantic models for user and authentication requests and responses.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field

from videotube.application.dto.common_dto import CamelModel, MediaResponse
from videotube.domain.models.user import User


class LoginRequest(CamelModel):
    """DTO for logging in with either the username or the email."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: str = Field(..., description="Plain text password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username": "janedoe", "password": "s3cret-pass"}
        }
    )


class RefreshTokenRequest(CamelModel):
    """DTO for clients that cannot send the refreshToken cookie."""
    refresh_token: Optional[str] = None


class ChangePasswordRequest(CamelModel):
    old_password: str
    new_password: str


class UserResponse(CamelModel):
    """DTO for a user as other clients may see it (no password, no refresh token)."""
    id: str = Field(..., alias="_id")
    username: str
    email: str
    full_name: str
    avatar: Optional[MediaResponse] = None
    cover_image: Optional[MediaResponse] = None
    watch_history: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            avatar=MediaResponse(url=user.avatar.url) if user.avatar else None,
            cover_image=MediaResponse(url=user.cover_image.url) if user.cover_image else None,
            watch_history=list(user.watch_history),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class LoginResponse(CamelModel):
    user: UserResponse
    access_token: str
    refresh_token: str


class AccessTokenResponse(CamelModel):
    access_token: str
