"""Lambda handler to run Alembic migrations.

SECURITY NOTES:
- Database credentials are never logged
- Only safe connection metadata (host, port, database name) is logged
"""

from __future__ import annotations

from typing import Any
from typing import Mapping
from urllib.parse import urlparse

from guide_admin.db.connection import get_database_url
from guide_admin.utils.logging import configure_logging, get_logger

from .runner import _run_migrations
from .utils import _run_with_retry

configure_logging()
logger = get_logger(__name__)


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Upgrade the database schema to the latest revision."""
    try:
        database_url = get_database_url()

        # SECURITY: Log connection details without password for debugging
        parsed = urlparse(database_url)
        logger.info(
            f"Connecting to database: host={parsed.hostname}, port={parsed.port}, "
            f"database={parsed.path.lstrip('/')}"
        )

        _run_with_retry(_run_migrations, database_url)
        logger.info("Migrations completed successfully")
        return {"status": "ok"}
    except Exception as exc:
        error_type = type(exc).__name__
        logger.error(
            "Migrations failed",
            extra={"error_type": error_type},
            exc_info=True,
        )
        return {"status": "failed", "error_type": error_type}
