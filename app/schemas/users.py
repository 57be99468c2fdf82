"""User account request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=8, max_length=256)
    role: str = Field(default="user", max_length=32)
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)


class UserUpdateRequest(BaseModel):
    email: str | None = Field(default=None, min_length=3, max_length=320)
    password: str | None = Field(default=None, min_length=8, max_length=256)
    role: str | None = Field(default=None, max_length=32)
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    profile_image_url: str | None = Field(default=None, max_length=500)
    is_active: bool | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    role: str
    is_active: bool
    created_at: datetime | None = None


class PermissionsResponse(BaseModel):
    can_create: bool
    can_read: bool
    can_update: bool
    can_delete: bool
    can_manage_users: bool
    can_view_reports: bool
    can_generate_pdfs: bool


class CurrentUserResponse(BaseModel):
    user: UserResponse
    role_display_name: str
    permissions: PermissionsResponse
