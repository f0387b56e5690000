"""ORM model for key-value application settings."""

from sqlalchemy import JSON, Column, Integer, String
from sqlalchemy.dialects.postgresql import JSONB

from shopkeep.models.base import Base, TimestampMixin


class Setting(TimestampMixin, Base):
    """Key-value row; value is opaque JSON (JSONB on PostgreSQL)."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(255), nullable=False, unique=True, index=True)
    value = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)
