"""Lookup helper for key-value settings."""

from typing import Any

from sqlalchemy.orm import Session

from shopkeep.models import Setting


def get_setting(db: Session, key: str, default: Any = None) -> Any:
    """Return the value stored under key, or default when the key is missing or its value is null."""
    row = db.query(Setting).filter(Setting.key == key).first()
    if row is None or row.value is None:
        return default
    return row.value
