"""SQLAlchemy ORM models."""

from shopkeep.models.base import MAX_INT_ID, Base
from shopkeep.models.catalog import Category, Product
from shopkeep.models.revoked_token import RevokedToken
from shopkeep.models.role import Permission, Role, role_has_permissions
from shopkeep.models.setting import Setting
from shopkeep.models.user import User

__all__ = [
    "Base",
    "MAX_INT_ID",
    "Category",
    "Permission",
    "Product",
    "RevokedToken",
    "Role",
    "Setting",
    "User",
    "role_has_permissions",
]
