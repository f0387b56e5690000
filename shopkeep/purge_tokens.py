"""
CLI entrypoint for the revoked-token purge job. Run from cron, e.g.:

  python -m shopkeep.purge_tokens

Or hourly: 0 * * * * cd /path/to/shopkeep && .venv/bin/python -m shopkeep.purge_tokens
"""

import logging
import sys

from shopkeep.core.config import get_settings
from shopkeep.core.database import SessionLocal
from shopkeep.services.revocation import purge_revoked_tokens

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Delete revoked-token rows that can no longer be presented."""
    settings = get_settings()
    db = SessionLocal()
    try:
        deleted = purge_revoked_tokens(db, settings)
        logger.info("Token purge completed: tokens_deleted=%s", deleted)
        return 0
    except Exception as e:
        logger.exception("Token purge failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
