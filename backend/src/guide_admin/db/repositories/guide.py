"""Repository for Guide entities."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from guide_admin.db.models import Guide
from guide_admin.db.repositories.base import BaseRepository


class GuideRepository(BaseRepository[Guide]):
    """Repository for Guide CRUD operations."""

    search_columns = ("title", "short_description", "category", "location")

    def __init__(self, session: Session):
        super().__init__(session, Guide)

    def create_from_record(self, record: dict) -> Guide:
        """Insert a guide from a flat record."""
        columns = set(Guide.__table__.columns.keys())
        guide = Guide(**{k: v for k, v in record.items() if k in columns})
        return self.create(guide)

    def get_by_slug(self, slug: str) -> Optional[Guide]:
        query = select(Guide).where(Guide.slug == slug)
        return self._session.execute(query).scalar_one_or_none()
