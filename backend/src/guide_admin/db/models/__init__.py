"""SQLAlchemy models for the guide admin data."""

from guide_admin.db.models.base_item import Activity, BaseItem, Service
from guide_admin.db.models.enums import (
    EstablishmentCategory,
    PartnerSection,
    PriceRange,
    ProfileVisibility,
    RecurrencePattern,
    ServiceCategory,
)
from guide_admin.db.models.event import Event
from guide_admin.db.models.guide import Guide
from guide_admin.db.models.partner import Partner
from guide_admin.db.models.profile import Profile

__all__ = [
    "Activity",
    "BaseItem",
    "EstablishmentCategory",
    "Event",
    "Guide",
    "Partner",
    "PartnerSection",
    "PriceRange",
    "Profile",
    "ProfileVisibility",
    "RecurrencePattern",
    "Service",
    "ServiceCategory",
]
