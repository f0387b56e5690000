"""ORM models for roles, permissions and the role-permission link table."""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from shopkeep.models.base import Base, TimestampMixin

role_has_permissions = Table(
    "role_has_permissions",
    Base.metadata,
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "permission_id",
        Integer,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Permission(TimestampMixin, Base):
    """Named permission. Stored and listed only; not enforced on routes."""

    __tablename__ = "permissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    guard_name = Column(String(64), nullable=False, default="api")


class Role(TimestampMixin, Base):
    """Named role grouping a set of permissions."""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    guard_name = Column(String(64), nullable=False, default="api")

    permissions = relationship(
        "Permission",
        secondary=role_has_permissions,
        order_by="Permission.id",
        lazy="selectin",
    )
