"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator

from shopkeep.core.security import (
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)


def strip_required_name(v: str) -> str:
    """Strip surrounding whitespace; a name that is only whitespace is rejected."""
    v = v.strip()
    if not v:
        raise ValueError("Name must not be blank.")
    return v


class RegisterRequest(BaseModel):
    """Self-service registration; password must be confirmed."""

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: EmailStr = Field(..., description="Login e-mail (unique)")
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    password_confirmation: str = Field(..., max_length=PASSWORD_MAX_LEN)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required_name(v)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password_confirmation")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and v != password:
            raise ValueError("The password confirmation does not match.")
        return v


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr = Field(..., description="E-mail")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class TokenResponse(BaseModel):
    """JWT access token bundle returned by login and refresh."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Seconds until the access token expires")


class CurrentUser(BaseModel):
    """Authenticated user (id, name, email) passed explicitly into route handlers."""

    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class UserRead(BaseModel):
    """Public user representation (no password hash)."""

    id: int
    name: str
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    """Plain confirmation message (logout, deletes)."""

    message: str
