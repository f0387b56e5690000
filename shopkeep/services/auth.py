"""
Token lifecycle: login, token issue, authentication of presented tokens, refresh and logout.

Route handlers translate every AuthError into a generic 401; the specific
AuthFailure reason is only logged.
"""

import logging
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

import jwt
from sqlalchemy.orm import Session

from shopkeep.core.config import get_settings
from shopkeep.core.security import (
    create_access_token,
    decode_access_token,
    dummy_password_hash,
    verify_password,
)
from shopkeep.models import MAX_INT_ID, User
from shopkeep.schemas.auth import TokenResponse
from shopkeep.services.revocation import is_revoked, revoke_token

logger = logging.getLogger(__name__)


class AuthFailure(str, Enum):
    """Why a credential or token was rejected (server-side only)."""

    MISSING_TOKEN = "missing_token"
    MALFORMED_TOKEN = "malformed_token"
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"
    REVOKED = "revoked"
    UNKNOWN_SUBJECT = "unknown_subject"
    INVALID_CREDENTIALS = "invalid_credentials"


class AuthError(Exception):
    """Raised when authentication fails. reason is never sent to the client."""

    def __init__(self, reason: AuthFailure, message: str | None = None) -> None:
        self.reason = reason
        self.message = message or reason.value
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Token is malformed, badly signed, missing claims, or revoked."""

    def __init__(self, reason: AuthFailure = AuthFailure.MALFORMED_TOKEN) -> None:
        super().__init__(reason)


class ExpiredTokenError(AuthError):
    """Token is past its exp (or, for refresh, past its refresh window)."""

    def __init__(self) -> None:
        super().__init__(AuthFailure.EXPIRED)


def issue_token(user: User, orig_iat: int | None = None) -> TokenResponse:
    """Sign a new access token for user and wrap it in the response bundle."""
    settings = get_settings()
    token = create_access_token(sub=user.id, orig_iat=orig_iat)
    return TokenResponse(
        access_token=token,
        token_type="bearer",
        expires_in=settings.JWT_EXPIRE_MINUTES * 60,
    )


def read_token(db: Session, token: str, allow_expired: bool = False) -> dict[str, Any]:
    """
    Decode token, verify signature and required claims, and check revocation.

    allow_expired skips the exp check (refresh applies its own window).
    """
    try:
        payload = decode_access_token(token, verify_exp=not allow_expired)
    except jwt.ExpiredSignatureError as e:
        raise ExpiredTokenError() from e
    except jwt.InvalidSignatureError as e:
        raise InvalidTokenError(AuthFailure.INVALID_SIGNATURE) from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError(AuthFailure.MALFORMED_TOKEN) from e

    try:
        int(payload["sub"])
        int(payload["orig_iat"])
    except (TypeError, ValueError) as e:
        raise InvalidTokenError(AuthFailure.MALFORMED_TOKEN) from e

    if get_settings().JWT_BLACKLIST_ENABLED and is_revoked(db, str(payload["jti"])):
        raise InvalidTokenError(AuthFailure.REVOKED)
    return payload


def _subject(db: Session, payload: dict[str, Any]) -> User:
    # The user may have been deleted after the token was issued.
    user_id = int(payload["sub"])
    user = db.get(User, user_id) if 1 <= user_id <= MAX_INT_ID else None
    if user is None:
        raise AuthError(AuthFailure.UNKNOWN_SUBJECT)
    return user


def authenticate(db: Session, token: str | None) -> tuple[User, dict[str, Any]]:
    """Resolve a presented Bearer token to its user and claims, or raise AuthError."""
    if not token:
        raise AuthError(AuthFailure.MISSING_TOKEN)
    payload = read_token(db, token)
    return _subject(db, payload), payload


def login(db: Session, email: str, password: str) -> User:
    """
    Check email/password and return the user. Raises AuthError(INVALID_CREDENTIALS)
    for both unknown email and wrong password; bcrypt runs in both cases.
    """
    user = db.query(User).filter(User.email == email.lower()).first()
    if user is None:
        verify_password(password, dummy_password_hash())
        logger.info(
            "Login rejected",
            extra={"auth_event": "login", "reason": "unknown_email"},
        )
        raise AuthError(AuthFailure.INVALID_CREDENTIALS)
    if not verify_password(password, user.password_hash):
        logger.info(
            "Login rejected",
            extra={"auth_event": "login", "user_id": user.id, "reason": "bad_password"},
        )
        raise AuthError(AuthFailure.INVALID_CREDENTIALS)
    logger.info("Login succeeded", extra={"auth_event": "login", "user_id": user.id})
    return user


def refresh(db: Session, token: str | None) -> TokenResponse:
    """
    Exchange a token for a new one. The old token may be expired as long as the
    refresh window (JWT_REFRESH_TTL_MINUTES from orig_iat) is still open. The old
    token id is revoked so it cannot be used or refreshed again.
    """
    settings = get_settings()
    if not token:
        raise AuthError(AuthFailure.MISSING_TOKEN)
    payload = read_token(db, token, allow_expired=True)

    orig_iat = int(payload["orig_iat"])
    window_end = datetime.fromtimestamp(orig_iat, UTC) + timedelta(
        minutes=settings.JWT_REFRESH_TTL_MINUTES
    )
    if datetime.now(UTC) >= window_end:
        raise ExpiredTokenError()

    user = _subject(db, payload)
    if settings.JWT_BLACKLIST_ENABLED and not revoke_token(db, payload, settings):
        # Lost a race with another refresh/logout of the same token.
        raise InvalidTokenError(AuthFailure.REVOKED)

    logger.info("Token refreshed", extra={"auth_event": "refresh", "user_id": user.id})
    return issue_token(user, orig_iat=orig_iat)


def logout(db: Session, payload: dict[str, Any]) -> None:
    """Invalidate the presented (already authenticated) token."""
    settings = get_settings()
    if settings.JWT_BLACKLIST_ENABLED:
        revoke_token(db, payload, settings)
    logger.info(
        "Logged out",
        extra={"auth_event": "logout", "user_id": int(payload["sub"])},
    )
