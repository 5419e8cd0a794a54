"""Repository for Profile entities."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from guide_admin.db.models import Profile
from guide_admin.db.repositories.base import BaseRepository


class ProfileRepository(BaseRepository[Profile]):
    """Repository for Profile CRUD operations."""

    search_columns = ("name", "username", "email")

    def __init__(self, session: Session):
        super().__init__(session, Profile)

    def is_admin(self, user_id: str) -> Optional[bool]:
        """Return the admin flag for a user, or None if no profile exists."""
        profile = self.get_by_id(user_id)
        if profile is None:
            return None
        return bool(profile.is_admin)

    def _ordering(self) -> tuple:
        return (Profile.created_at.desc(), Profile.id)
