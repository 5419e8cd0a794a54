"""Category-conditional shaping of partner attributes and service data.

Partners carry an ``attributes`` bag and services a ``serviceData`` bag
whose keys depend on the category. Both are driven by closed lookup
tables so every supported category is listed in one place and unknown
categories fall through to a single default.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from guide_admin.db.models.enums import (
    EstablishmentCategory,
    PartnerSection,
    ServiceCategory,
)

# Input flag -> facility label, in output order.
ACCOMMODATION_FACILITY_LABELS: tuple[tuple[str, str], ...] = (
    ("hasPool", "Swimming Pool"),
    ("hasFreeWifi", "Free WiFi"),
    ("hasBreakfast", "Breakfast Included"),
    ("hasAirCon", "Air Conditioning"),
)
DEFAULT_CHECK_IN = "14:00"
DEFAULT_CHECK_OUT = "11:00"
DEFAULT_CUISINE = "General"
VEGAN_OPTIONS_LABEL = "Vegan Options"


def _value(section: Any) -> str:
    return str(getattr(section, "value", section) or "").lower()


def _strings(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return [str(item) for item in value if item is not None and str(item) != ""]


def _shape_accommodation(inputs: Mapping[str, Any]) -> dict[str, Any]:
    attributes: dict[str, Any] = {
        "accommodationType": "hotel",
        "rooms": [],
        "facilities": [
            label for key, label in ACCOMMODATION_FACILITY_LABELS if inputs.get(key)
        ],
        "policies": {"checkIn": DEFAULT_CHECK_IN, "checkOut": DEFAULT_CHECK_OUT},
    }
    room_count = inputs.get("roomCount")
    if isinstance(room_count, str):
        room_count = room_count.strip()
    if room_count is not None and room_count != "":
        attributes["roomCount"] = int(float(room_count))
    return attributes


def _expand_accommodation(attributes: Mapping[str, Any]) -> dict[str, Any]:
    facilities = set(_strings(attributes.get("facilities")))
    inputs: dict[str, Any] = {
        key: label in facilities for key, label in ACCOMMODATION_FACILITY_LABELS
    }
    if attributes.get("roomCount") is not None:
        inputs["roomCount"] = attributes["roomCount"]
    return inputs


def _shape_food_drink(inputs: Mapping[str, Any]) -> dict[str, Any]:
    cuisine = str(inputs.get("cuisine") or "").strip()
    return {
        "establishmentType": "restaurant",
        "cuisine": [cuisine or DEFAULT_CUISINE],
        "dietaryOptions": [VEGAN_OPTIONS_LABEL] if inputs.get("hasVeganOptions") else [],
        "alcoholServed": bool(inputs.get("alcoholServed")),
    }


def _expand_food_drink(attributes: Mapping[str, Any]) -> dict[str, Any]:
    cuisine = _strings(attributes.get("cuisine"))
    return {
        "cuisine": cuisine[0] if cuisine else "",
        "hasVeganOptions": VEGAN_OPTIONS_LABEL
        in _strings(attributes.get("dietaryOptions")),
        "alcoholServed": bool(attributes.get("alcoholServed")),
    }


def _shape_transport(inputs: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "transportType": "general",
        "vehicles": _strings(inputs.get("vehicleTypes")),
        "requiresLicense": bool(inputs.get("requiresLicense")),
        "services": [],
    }


def _expand_transport(attributes: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "vehicleTypes": _strings(attributes.get("vehicles")),
        "requiresLicense": bool(attributes.get("requiresLicense")),
    }


def _shape_health(inputs: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "serviceType": "medical",
        "specialties": _strings(inputs.get("specialties")),
        "insurance": {"acceptsInsurance": bool(inputs.get("acceptsInsurance"))},
        "emergency": False,
    }


def _expand_health(attributes: Mapping[str, Any]) -> dict[str, Any]:
    insurance = attributes.get("insurance")
    accepts = insurance.get("acceptsInsurance") if isinstance(insurance, Mapping) else False
    return {
        "specialties": _strings(attributes.get("specialties")),
        "acceptsInsurance": bool(accepts),
    }


@dataclass(frozen=True)
class AttributeShape:
    """Shaping and expansion functions for one partner category."""

    shape: Callable[[Mapping[str, Any]], dict[str, Any]]
    expand: Callable[[Mapping[str, Any]], dict[str, Any]]


PARTNER_ATTRIBUTE_SHAPES: dict[tuple[str, str], AttributeShape] = {
    (
        PartnerSection.ESTABLISHMENT.value,
        EstablishmentCategory.ACCOMMODATION.value,
    ): AttributeShape(_shape_accommodation, _expand_accommodation),
    (
        PartnerSection.ESTABLISHMENT.value,
        EstablishmentCategory.FOOD_DRINK.value,
    ): AttributeShape(_shape_food_drink, _expand_food_drink),
    (
        PartnerSection.ESTABLISHMENT.value,
        EstablishmentCategory.TRANSPORT_PROVIDER.value,
    ): AttributeShape(_shape_transport, _expand_transport),
    (
        PartnerSection.SERVICE.value,
        ServiceCategory.HEALTH.value,
    ): AttributeShape(_shape_health, _expand_health),
}


def has_attribute_fields(section: Any, main_category: Any) -> bool:
    """Return True if the category has category-specific form fields."""
    return (_value(section), _value(main_category)) in PARTNER_ATTRIBUTE_SHAPES


def shape_partner_attributes(
    section: Any,
    main_category: Any,
    inputs: Optional[Mapping[str, Any]],
) -> Optional[dict[str, Any]]:
    """Reduce raw attribute inputs to the attributes stored for a category.

    Args:
        section: Partner section (enum or value).
        main_category: Main category (enum or value).
        inputs: Flat attribute inputs from the partner form.

    Returns:
        The minimal attributes object, or None when the category has no
        specific fields.
    """
    shape = PARTNER_ATTRIBUTE_SHAPES.get((_value(section), _value(main_category)))
    if shape is None:
        return None
    return shape.shape(inputs or {})


def expand_partner_attributes(
    section: Any,
    main_category: Any,
    attributes: Optional[Mapping[str, Any]],
) -> dict[str, Any]:
    """Turn stored attributes back into flat form inputs for editing."""
    shape = PARTNER_ATTRIBUTE_SHAPES.get((_value(section), _value(main_category)))
    if shape is None:
        return {}
    return shape.expand(attributes or {})


# Service data: category -> field defaults. Only these keys are kept.
SERVICE_DATA_FIELDS: dict[str, dict[str, Any]] = {
    ServiceCategory.ACCOMMODATION.value: {
        "roomTypes": [],
        "checkIn": "",
        "checkOut": "",
        "cancellationPolicy": "",
        "distanceToBeach": 0,
    },
    ServiceCategory.HEALTH.value: {
        "emergencyService": False,
        "emergencyNumber": "",
        "walkInAccepted": False,
        "services": [],
        "insuranceAccepted": [],
    },
    ServiceCategory.WELLNESS.value: {
        "treatments": [],
        "specialties": [],
        "bookingRequired": False,
    },
    ServiceCategory.MOBILITY.value: {
        "serviceType": "",
        "vehicles": [],
        "rentalRequirements": [],
        "bookingRequired": False,
    },
    ServiceCategory.REAL_ESTATE.value: {
        "yearsInBusiness": 0,
        "servicesOffered": [],
    },
}


def shape_service_data(
    category: Any,
    raw: Optional[Mapping[str, Any]],
) -> dict[str, Any]:
    """Keep only the service data keys of a category, filling defaults.

    Unknown categories pass the bag through unchanged.
    """
    data = dict(raw or {})
    fields = SERVICE_DATA_FIELDS.get(_value(category))
    if fields is None:
        return data
    shaped: dict[str, Any] = {}
    for key, default in fields.items():
        value = data.get(key)
        shaped[key] = copy.deepcopy(default) if value is None else value
    return shaped
