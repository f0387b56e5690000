"""Password hashing and JWT creation/verification for authentication."""

import uuid
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from shopkeep.core.config import settings

# Min/max lengths for name, email and password validation.
NAME_MIN_LEN = 1
NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

# Claims every access token must carry; decode rejects tokens missing any of them.
REQUIRED_CLAIMS = ["sub", "iat", "exp", "jti", "orig_iat"]


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time compare inside bcrypt)."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Hash checked against when an email is unknown, so login timing does not reveal accounts."""
    return hash_password("shopkeep-timing-equalization")


def create_access_token(sub: str | int, orig_iat: datetime | int | None = None) -> str:
    """
    Create a JWT access token with sub (user id), iat, exp, jti and orig_iat.

    orig_iat is the time of the first login in a refresh chain; refresh keeps it so
    the refresh window is bounded from the original authentication.
    """
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    if orig_iat is None:
        orig_iat = now
    if isinstance(orig_iat, datetime):
        orig_iat = int(orig_iat.timestamp())
    payload: dict[str, Any] = {
        "sub": str(sub),
        "iat": now,
        "exp": expire,
        "jti": uuid.uuid4().hex,
        "orig_iat": orig_iat,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, verify_exp: bool = True) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, iat, exp, jti, orig_iat).
    Raises jwt.ExpiredSignatureError on expiry, jwt.PyJWTError on any other failure.
    With verify_exp=False the signature is still checked but expiry is not.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": REQUIRED_CLAIMS, "verify_exp": verify_exp},
    )
