"""Form schemas for the admin entities."""

from guide_admin.schemas.activities import ActivityForm
from guide_admin.schemas.common import Violation, validate_form
from guide_admin.schemas.events import EventForm
from guide_admin.schemas.guides import GuideForm
from guide_admin.schemas.items import BaseItemForm
from guide_admin.schemas.partners import PartnerForm
from guide_admin.schemas.profiles import ProfileForm
from guide_admin.schemas.services import ServiceForm
from guide_admin.schemas.sponsorship import SponsorshipForm

__all__ = [
    "ActivityForm",
    "BaseItemForm",
    "EventForm",
    "GuideForm",
    "PartnerForm",
    "ProfileForm",
    "ServiceForm",
    "SponsorshipForm",
    "Violation",
    "validate_form",
]
