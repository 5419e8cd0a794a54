"""Repository for Event entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from guide_admin.db.models import Event
from guide_admin.db.repositories.base import BaseRepository


class EventRepository(BaseRepository[Event]):
    """Repository for Event CRUD operations."""

    search_columns = ("title", "location", "category")

    def __init__(self, session: Session):
        super().__init__(session, Event)

    def create_from_record(self, record: dict) -> Event:
        """Insert an event from a flat record."""
        columns = set(Event.__table__.columns.keys())
        event = Event(**{k: v for k, v in record.items() if k in columns})
        return self.create(event)

    def _ordering(self) -> tuple:
        return (Event.time.desc(), Event.id)
