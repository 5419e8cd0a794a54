"""Base repository with common CRUD operations.

This module provides a generic base repository that can be extended
for specific entity types.
"""

from __future__ import annotations

from typing import Any
from typing import Generic
from typing import Optional
from typing import Sequence
from typing import Type
from typing import TypeVar

from sqlalchemy import Select
from sqlalchemy import func
from sqlalchemy import or_
from sqlalchemy import select
from sqlalchemy.orm import Session

from guide_admin.db.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Base repository with common CRUD operations.

    Subclasses set ``search_columns`` to the columns matched by the
    free-text ``search`` filter of paginated listings.

    Type Parameters:
        T: The SQLAlchemy model type this repository manages.
    """

    search_columns: tuple[str, ...] = ()

    def __init__(self, session: Session, model: Type[T]):
        """Initialize the repository.

        Args:
            session: SQLAlchemy session for database operations.
            model: The SQLAlchemy model class.
        """
        self._session = session
        self._model = model

    @property
    def session(self) -> Session:
        """Get the current session."""
        return self._session

    def get_by_id(self, entity_id: Any) -> Optional[T]:
        """Get an entity by its primary key.

        Args:
            entity_id: The primary key.

        Returns:
            The entity if found, None otherwise.
        """
        return self._session.get(self._model, entity_id)

    def get_page(
        self,
        page: int = 1,
        page_size: int = 10,
        search: Optional[str] = None,
    ) -> tuple[Sequence[T], int]:
        """Get one page of entities with offset pagination.

        Args:
            page: 1-based page number.
            page_size: Number of entities per page.
            search: Optional case-insensitive substring filter.

        Returns:
            Tuple of (entities on the page, total matching entities).
        """
        query = self._apply_search(self._base_query(), search)
        total = self._count(query)
        offset = (page - 1) * page_size
        rows = (
            self._session.execute(
                query.order_by(*self._ordering()).offset(offset).limit(page_size)
            )
            .scalars()
            .all()
        )
        return rows, total

    def exists(self, entity_id: Any) -> bool:
        """Check if an entity exists."""
        return self.get_by_id(entity_id) is not None

    def create(self, entity: T) -> T:
        """Create a new entity.

        Args:
            entity: The entity to create.

        Returns:
            The created entity with generated fields populated.
        """
        self._session.add(entity)
        self._session.flush()
        self._session.refresh(entity)
        return entity

    def update(self, entity: T) -> T:
        """Update an existing entity.

        Args:
            entity: The entity to update.

        Returns:
            The updated entity.
        """
        self._session.add(entity)
        self._session.flush()
        self._session.refresh(entity)
        return entity

    def apply_changes(self, entity: T, changes: dict[str, Any]) -> T:
        """Assign column values from a flat record and persist them.

        Keys that are not columns of the model are ignored.
        """
        columns = set(self._model.__table__.columns.keys())
        for key, value in changes.items():
            if key in columns and key != "id":
                setattr(entity, key, value)
        return self.update(entity)

    def delete(self, entity: T) -> None:
        """Delete an entity.

        Args:
            entity: The entity to delete.
        """
        self._session.delete(entity)
        self._session.flush()

    def count(self) -> int:
        """Count total entities."""
        return self._count(self._base_query())

    def _base_query(self) -> Select:
        return select(self._model)

    def _ordering(self) -> tuple[Any, ...]:
        return (self._model.updated_at.desc(), self._model.id)

    def _apply_search(self, query: Select, search: Optional[str]) -> Select:
        if not search or not search.strip() or not self.search_columns:
            return query
        pattern = f"%{escape_like_pattern(search.strip())}%"
        clauses = [
            getattr(self._model, column).ilike(pattern, escape="\\")
            for column in self.search_columns
        ]
        return query.where(or_(*clauses))

    def _count(self, query: Select) -> int:
        result = self._session.execute(
            select(func.count()).select_from(query.subquery())
        )
        return result.scalar() or 0


def escape_like_pattern(pattern: str) -> str:
    """Escape LIKE pattern special characters.

    Prevents users from injecting wildcards into search patterns.

    Args:
        pattern: The search pattern to escape.

    Returns:
        The escaped pattern safe for use in LIKE queries.
    """
    # Escape backslash first, then percent and underscore
    return pattern.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
