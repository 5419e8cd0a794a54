"""Database base class for SQLAlchemy models."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for SQLAlchemy models."""

    # Type hint for id column - actual column defined in subclasses
    id: Any

    def as_record(self) -> dict[str, Any]:
        """Return the row as a flat mapping of column name to value."""
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }
