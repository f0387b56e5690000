"""Request/response schemas for roles and permissions."""

from datetime import datetime

from pydantic import BaseModel, Field


class PermissionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    guard_name: str = Field(default="api", min_length=1, max_length=64)


class PermissionRead(BaseModel):
    id: int
    name: str
    guard_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class RoleCreate(BaseModel):
    """Create a role; permissions are given by name and must already exist."""

    name: str = Field(..., min_length=1, max_length=255)
    guard_name: str = Field(default="api", min_length=1, max_length=64)
    permissions: list[str] = Field(default_factory=list)


class RoleUpdate(BaseModel):
    """Partial role update; when permissions is given it replaces the current set."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    guard_name: str | None = Field(default=None, min_length=1, max_length=64)
    permissions: list[str] | None = None


class RoleRead(BaseModel):
    id: int
    name: str
    guard_name: str
    permissions: list[PermissionRead] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
