"""Mapping between flat event rows and the nested event view model."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from guide_admin.mappers.base import (
    as_record,
    flag,
    iso_timestamp,
    nested,
    number,
    optional_text,
    string_list,
    text,
)
from guide_admin.utils.json_fields import decode_or_default, encode_json_field
from guide_admin.utils.parsers import parse_datetime, parse_leading_float

FACILITY_KEYS: tuple[str, ...] = (
    "parking",
    "atm",
    "foodAvailable",
    "toilets",
    "wheelchair",
    "wifi",
    "petFriendly",
    "childFriendly",
)

# view key -> column, for nullable text columns edited on the form
_OPTIONAL_TEXT_FIELDS = {
    "image": "image",
    "location": "location",
    "description": "description",
    "duration": "duration",
    "sponsorEndDate": "sponsor_end_date",
}
_ORGANIZER_FIELDS = {
    "name": "organizer_name",
    "contactEmail": "organizer_contact_email",
    "contactPhone": "organizer_contact_phone",
    "website": "organizer_website",
}


def derive_day(time_value: Any) -> Optional[int]:
    """Return the day of week for an event time, Sunday = 0.

    The weekday is taken from the time as written, without converting
    time zones. Unparseable values give None.
    """
    if not time_value or not isinstance(time_value, str):
        return None
    try:
        parsed = parse_datetime(time_value.strip())
    except ValueError:
        return None
    if parsed is None:
        return None
    return (parsed.weekday() + 1) % 7


def canonical_price(value: Any) -> str:
    """Normalise numeric price text: "12.50" -> "12.5", "abc" -> "0"."""
    parsed = parse_leading_float(value)
    if parsed is None:
        return "0"
    if parsed.is_integer():
        return str(int(parsed))
    return repr(parsed)


def _ticket_types(value: Any) -> list[dict[str, Any]]:
    types = []
    for entry in value if isinstance(value, list) else []:
        if not isinstance(entry, Mapping):
            continue
        ticket_type: dict[str, Any] = {
            "name": text(entry.get("name")),
            "price": text(entry.get("price")),
        }
        if entry.get("description") is not None:
            ticket_type["description"] = text(entry.get("description"))
        types.append(ticket_type)
    return types


def event_to_view_model(source: Any) -> dict[str, Any]:
    """Convert a stored event row into the nested form view model.

    Never raises on malformed JSON columns; they decode to {}.
    """
    record = as_record(source)
    facilities = decode_or_default(record.get("facilities"), field="facilities")
    tickets_raw = decode_or_default(record.get("tickets"), field="tickets")

    tickets: dict[str, Any] = {
        "url": text(tickets_raw.get("url")),
        "availableCount": number(tickets_raw.get("availableCount")),
    }
    if "types" in tickets_raw:
        tickets["types"] = _ticket_types(tickets_raw.get("types"))

    pattern = record.get("recurrence_pattern")
    recurrence = None
    if pattern:
        recurrence = {
            "pattern": text(pattern),
            "customPattern": text(record.get("recurrence_custom_pattern")),
            "endDate": text(record.get("recurrence_end_date")),
        }

    return {
        "id": text(record.get("id")),
        "title": text(record.get("title")),
        "category": text(record.get("category")),
        "image": text(record.get("image")),
        "time": text(record.get("time")),
        "location": text(record.get("location")),
        "price": text(record.get("price")),
        "description": text(record.get("description")),
        "coordinates": {
            "latitude": number(record.get("latitude")),
            "longitude": number(record.get("longitude")),
        },
        "organizer": {
            key: text(record.get(column)) for key, column in _ORGANIZER_FIELDS.items()
        },
        "recurrence": recurrence,
        "duration": text(record.get("duration")),
        "tags": string_list(record.get("tags"), field="tags"),
        "capacity": number(record.get("capacity")),
        "facilities": {key: flag(facilities.get(key)) for key in FACILITY_KEYS},
        "tickets": tickets,
        "isSponsored": flag(record.get("is_sponsored")),
        "sponsorEndDate": text(record.get("sponsor_end_date")),
        "attendeeCount": number(record.get("attendee_count")),
        "rating": number(record.get("rating")),
        "reviews": number(record.get("reviews")),
        "createdAt": iso_timestamp(record.get("created_at")),
        "updatedAt": iso_timestamp(record.get("updated_at")),
    }


def _tags(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    return [str(tag) for tag in value]


def event_to_record(view: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten an event view model into writable columns.

    Only keys present in ``view`` produce columns, so a partial view
    model yields a partial update. Read-only fields (id, stats,
    timestamps) are ignored.
    """
    record: dict[str, Any] = {}

    for key in ("title", "category"):
        if key in view:
            record[key] = text(view[key]).strip()

    for key, column in _OPTIONAL_TEXT_FIELDS.items():
        if key in view:
            record[column] = optional_text(view[key])

    if "time" in view:
        record["time"] = optional_text(view["time"])
        record["day"] = derive_day(record["time"])

    if "price" in view:
        record["price"] = canonical_price(view["price"])

    if "coordinates" in view:
        coordinates = nested(view, "coordinates")
        for key in ("latitude", "longitude"):
            if key in coordinates:
                value = coordinates[key]
                record[key] = None if value is None else float(value)

    if "organizer" in view:
        organizer = nested(view, "organizer")
        for key, column in _ORGANIZER_FIELDS.items():
            if key in organizer:
                record[column] = optional_text(organizer[key])

    if "recurrence" in view:
        recurrence = view["recurrence"]
        if not isinstance(recurrence, Mapping) or not recurrence.get("pattern"):
            record["recurrence_pattern"] = None
            record["recurrence_custom_pattern"] = None
            record["recurrence_end_date"] = None
        else:
            record["recurrence_pattern"] = text(recurrence["pattern"])
            if "customPattern" in recurrence:
                record["recurrence_custom_pattern"] = optional_text(
                    recurrence["customPattern"]
                )
            if "endDate" in recurrence:
                record["recurrence_end_date"] = optional_text(recurrence["endDate"])

    if "tags" in view:
        record["tags"] = _tags(view["tags"])

    if "capacity" in view:
        capacity = view["capacity"]
        record["capacity"] = None if capacity is None else int(capacity)

    if "facilities" in view:
        facilities = nested(view, "facilities")
        record["facilities"] = encode_json_field(
            {key: flag(facilities.get(key)) for key in FACILITY_KEYS}
        )

    if "tickets" in view:
        tickets = nested(view, "tickets")
        stored: dict[str, Any] = {}
        if "url" in tickets:
            stored["url"] = text(tickets["url"])
        if "availableCount" in tickets:
            stored["availableCount"] = number(tickets["availableCount"])
        if "types" in tickets:
            stored["types"] = _ticket_types(tickets["types"])
        record["tickets"] = encode_json_field(stored)

    if "isSponsored" in view:
        record["is_sponsored"] = flag(view["isSponsored"])

    return record
