"""Record <-> view-model mappers.

Stored rows are flat, snake_case and carry JSON-encoded sub-objects.
View models are nested, camelCase and fully defaulted so edit forms can
bind to every key.
"""

from guide_admin.mappers.activities import (
    activity_to_record,
    activity_to_response,
    activity_to_view_model,
)
from guide_admin.mappers.attributes import (
    expand_partner_attributes,
    has_attribute_fields,
    shape_partner_attributes,
    shape_service_data,
)
from guide_admin.mappers.events import (
    canonical_price,
    derive_day,
    event_to_record,
    event_to_view_model,
)
from guide_admin.mappers.guides import guide_to_record, guide_to_view_model
from guide_admin.mappers.partners import partner_to_record, partner_to_view_model
from guide_admin.mappers.profiles import profile_to_record, profile_to_view_model
from guide_admin.mappers.services import (
    service_to_record,
    service_to_response,
    service_to_view_model,
)

__all__ = [
    "activity_to_record",
    "activity_to_response",
    "activity_to_view_model",
    "canonical_price",
    "derive_day",
    "event_to_record",
    "event_to_view_model",
    "expand_partner_attributes",
    "guide_to_record",
    "guide_to_view_model",
    "has_attribute_fields",
    "partner_to_record",
    "partner_to_view_model",
    "profile_to_record",
    "profile_to_view_model",
    "service_to_record",
    "service_to_response",
    "service_to_view_model",
    "shape_partner_attributes",
    "shape_service_data",
]
