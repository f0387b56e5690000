"""Shared test helpers: fresh schema per test and a TestClient over the real app."""

import unittest
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from fastapi.testclient import TestClient

from shopkeep.core.config import get_settings
from shopkeep.core.database import SessionLocal, engine
from shopkeep.main import app
from shopkeep.models import Base

API = get_settings().API_PREFIX
PASSWORD = "pw123456"


def make_token(
    sub: str | int = 1,
    iat: datetime | None = None,
    exp: datetime | None = None,
    orig_iat: datetime | None = None,
    jti: str = "test-jti",
    secret: str | None = None,
    **extra: Any,
) -> str:
    """Sign a token with explicit claims (for expiry and tampering cases)."""
    settings = get_settings()
    now = datetime.now(UTC)
    iat = iat or now
    payload: dict[str, Any] = {
        "sub": str(sub),
        "iat": iat,
        "exp": exp or iat + timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
        "jti": jti,
        "orig_iat": int((orig_iat or iat).timestamp()),
    }
    payload.update(extra)
    return jwt.encode(
        payload,
        secret or settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


class DatabaseTestCase(unittest.TestCase):
    """Creates all tables before each test and drops them after."""

    def setUp(self) -> None:
        Base.metadata.create_all(engine)
        self.db = SessionLocal()

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(engine)


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient and register/login helpers."""

    def setUp(self) -> None:
        super().setUp()
        self.client = TestClient(app)

    def register(
        self,
        email: str = "a@x.com",
        password: str = PASSWORD,
        name: str = "Alice",
    ):
        return self.client.post(
            f"{API}/auth/register",
            json={
                "name": name,
                "email": email,
                "password": password,
                "password_confirmation": password,
            },
        )

    def login(self, email: str = "a@x.com", password: str = PASSWORD):
        return self.client.post(
            f"{API}/auth/login",
            json={"email": email, "password": password},
        )

    def token_for(self, email: str = "a@x.com") -> str:
        """Register (if needed) and log in; return the access token."""
        self.register(email=email)
        resp = self.login(email=email)
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["access_token"]

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
