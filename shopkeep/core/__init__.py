"""Core app configuration and database."""

from shopkeep.core.config import get_settings, settings
from shopkeep.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
