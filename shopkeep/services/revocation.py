"""Revoked token store: record token ids invalidated by logout/refresh, and purge stale rows."""

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shopkeep.models import RevokedToken

if TYPE_CHECKING:
    from shopkeep.core.config import Settings

logger = logging.getLogger(__name__)


def token_deadline(claims: dict[str, Any], settings: "Settings") -> datetime:
    """
    Last moment a token can still be accepted anywhere: its exp for normal
    requests, or the end of its refresh window for POST /auth/refresh.
    """
    exp = datetime.fromtimestamp(int(claims["exp"]), UTC)
    refresh_end = datetime.fromtimestamp(int(claims["orig_iat"]), UTC) + timedelta(
        minutes=settings.JWT_REFRESH_TTL_MINUTES
    )
    return max(exp, refresh_end)


def is_revoked(session: Session, jti: str) -> bool:
    """True if the token id has been revoked."""
    row = session.query(RevokedToken.id).filter(RevokedToken.jti == jti).first()
    return row is not None


def revoke_token(session: Session, claims: dict[str, Any], settings: "Settings") -> bool:
    """
    Record claims["jti"] as revoked. Returns False if it was already revoked
    (including a concurrent revoke that won the unique-key race).
    """
    row = RevokedToken(jti=claims["jti"], expires_at=token_deadline(claims, settings))
    session.add(row)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        return False
    return True


def purge_revoked_tokens(session: Session, settings: "Settings") -> int:
    """
    Delete revoked-token rows whose tokens can no longer be presented at all.

    Returns the number of rows deleted. Idempotent: safe to run repeatedly.
    """
    if not settings.JWT_BLACKLIST_ENABLED:
        logger.info("Token blacklist is disabled (JWT_BLACKLIST_ENABLED=false); skipping.")
        return 0

    cutoff = datetime.now(UTC)
    deleted_count = (
        session.query(RevokedToken)
        .filter(RevokedToken.expires_at < cutoff)
        .delete(synchronize_session=False)
    )
    session.commit()

    if deleted_count > 0:
        logger.info(
            "Revoked token purge: cutoff=%s, tokens_deleted=%s",
            cutoff.isoformat(),
            deleted_count,
        )
    return deleted_count
