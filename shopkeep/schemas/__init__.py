"""Pydantic request/response schemas."""

from shopkeep.schemas.auth import (
    CurrentUser,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
    UserRead,
)
from shopkeep.schemas.catalog import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)
from shopkeep.schemas.health import HealthResponse
from shopkeep.schemas.role import (
    PermissionCreate,
    PermissionRead,
    RoleCreate,
    RoleRead,
    RoleUpdate,
)
from shopkeep.schemas.setting import SettingCreate, SettingRead, SettingUpdate
from shopkeep.schemas.user import UserCreate, UserUpdate

__all__ = [
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "PermissionCreate",
    "PermissionRead",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "RegisterRequest",
    "RoleCreate",
    "RoleRead",
    "RoleUpdate",
    "SettingCreate",
    "SettingRead",
    "SettingUpdate",
    "TokenResponse",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
