"""Centralized database engine management.

Engines are cached at module level so warm Lambda invocations reuse
their connection pool.
"""

from __future__ import annotations

import os
from typing import Any
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool

from guide_admin.db.connection import get_database_url

_ENGINE_CACHE: dict[str, Engine] = {}


def get_engine(
    use_cache: bool = True,
    pool_class: Optional[type] = None,
) -> Engine:
    """Get or create a SQLAlchemy engine.

    Args:
        use_cache: Whether to use the engine cache.
        pool_class: Override the connection pool class.

    Returns:
        A configured SQLAlchemy engine.
    """
    cache_key = "default"
    if use_cache and cache_key in _ENGINE_CACHE:
        return _ENGINE_CACHE[cache_key]

    database_url = get_database_url()
    engine = create_engine(
        database_url,
        pool_pre_ping=True,
        connect_args=_get_connect_args(database_url),
        **_get_pool_settings(pool_class),
    )

    if use_cache:
        _ENGINE_CACHE[cache_key] = engine

    return engine


def clear_engine_cache() -> None:
    """Clear the engine cache.

    Useful for testing or when connection settings change.
    """
    for engine in _ENGINE_CACHE.values():
        engine.dispose()
    _ENGINE_CACHE.clear()


def _get_connect_args(database_url: str) -> dict[str, str]:
    """Return connection arguments for the database driver."""
    if not database_url.startswith("postgresql"):
        return {}
    sslmode = os.getenv("DATABASE_SSLMODE", "require")
    return {"sslmode": sslmode}


def _get_pool_settings(pool_class: Optional[type]) -> dict[str, Any]:
    """Return connection pool settings tuned for Lambda.

    Lambda runs one request per container, so the pool stays minimal.
    """
    if pool_class == NullPool:
        return {"poolclass": NullPool}

    return {
        "pool_size": int(os.getenv("DB_POOL_SIZE", "1")),
        "max_overflow": int(os.getenv("DB_MAX_OVERFLOW", "0")),
        "pool_recycle": int(os.getenv("DB_POOL_RECYCLE", "300")),
        "pool_timeout": int(os.getenv("DB_POOL_TIMEOUT", "30")),
    }
