"""Test package. Point the app at an in-memory SQLite database before anything imports settings."""

import os

os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key-with-at-least-32-bytes!"
os.environ["JWT_EXPIRE_MINUTES"] = "60"
os.environ["JWT_REFRESH_TTL_MINUTES"] = "20160"
os.environ["JWT_BLACKLIST_ENABLED"] = "true"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
