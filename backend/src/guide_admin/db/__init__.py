"""Database access layer: models, engine and repositories."""

from guide_admin.db.base import Base

__all__ = ["Base"]
