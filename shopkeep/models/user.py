"""ORM model for application users (credential store for JWT authentication)."""

from sqlalchemy import Column, Integer, String

from shopkeep.models.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """
    User account for JWT authentication.

    email is stored lower-cased and is unique; password_hash is a bcrypt hash.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
