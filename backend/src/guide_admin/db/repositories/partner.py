"""Repository for Partner entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from guide_admin.db.models import Partner
from guide_admin.db.repositories.base import BaseRepository


class PartnerRepository(BaseRepository[Partner]):
    """Repository for Partner CRUD operations."""

    search_columns = ("name", "short_description", "address")

    def __init__(self, session: Session):
        super().__init__(session, Partner)

    def create_from_record(self, record: dict) -> Partner:
        """Insert a partner from a flat record."""
        columns = set(Partner.__table__.columns.keys())
        partner = Partner(**{k: v for k, v in record.items() if k in columns})
        return self.create(partner)
