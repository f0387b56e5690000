"""ORM model for revoked JWT ids (logout and refresh invalidate tokens before expiry)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from shopkeep.models.base import Base


class RevokedToken(Base):
    """One row per revoked token id (jti). Rows past expires_at are purged by a CLI job."""

    __tablename__ = "revoked_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    jti = Column(String(64), nullable=False, unique=True, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    revoked_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
