"""Repository pattern implementations for database operations.

Repositories provide a clean abstraction over database operations,
making business logic independent of the persistence layer.
"""

from guide_admin.db.repositories.base import BaseRepository
from guide_admin.db.repositories.base_item import (
    ActivityRepository,
    BaseItemRepository,
    ServiceRepository,
)
from guide_admin.db.repositories.event import EventRepository
from guide_admin.db.repositories.guide import GuideRepository
from guide_admin.db.repositories.partner import PartnerRepository
from guide_admin.db.repositories.profile import ProfileRepository

__all__ = [
    "ActivityRepository",
    "BaseItemRepository",
    "BaseRepository",
    "EventRepository",
    "GuideRepository",
    "PartnerRepository",
    "ProfileRepository",
    "ServiceRepository",
]
