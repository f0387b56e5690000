"""Request/response schemas for key-value settings."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class SettingCreate(BaseModel):
    # Keys are addressed as a single path segment in /settings/{key}.
    key: str = Field(..., min_length=1, max_length=255, pattern=r"^[^/]+$")
    value: Any | None = None


class SettingUpdate(BaseModel):
    value: Any | None = None


class SettingRead(BaseModel):
    id: int
    key: str
    value: Any | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
