"""Mapping between guide rows and the guide view model.

Guides carry ordered content in JSON list columns (``sections``,
``items``, ``contacts``). Each entry is normalised to a fixed key set on
read and on write; entries that are not objects are dropped.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

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
from guide_admin.utils.json_fields import decode_or_default

CONTACT_KEYS = ("name", "type", "email", "phone", "website", "address", "description")

_OPTIONAL_TEXT_FIELDS = {
    "slug": "slug",
    "mainImage": "main_image",
    "shortDescription": "short_description",
    "longDescription": "long_description",
    "location": "location",
    "difficulty": "difficulty",
    "duration": "duration",
}
_STRING_LIST_FIELDS = {
    "tags": "tags",
    "galleryImages": "gallery_images",
    "equipment": "equipment",
    "facilities": "facilities",
}
_FREE_LIST_FIELDS = {
    "recommendations": "recommendations",
    "testimonials": "testimonials",
}


def _split(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return [str(item) for item in value if item is not None and str(item).strip()]


def _section(entry: Mapping[str, Any], index: int) -> dict[str, Any]:
    return {
        "title": text(entry.get("title")),
        "content": text(entry.get("content")),
        "order": number(entry.get("order")) or index + 1,
        "iconName": text(entry.get("iconName")),
    }


def _item(entry: Mapping[str, Any], index: int) -> dict[str, Any]:
    return {
        "title": text(entry.get("title")),
        "description": text(entry.get("description")),
        "tags": _split(entry.get("tags")),
    }


def _contact(entry: Mapping[str, Any], index: int) -> dict[str, Any]:
    return {key: text(entry.get(key)) for key in CONTACT_KEYS}


_ENTRY_LISTS: dict[str, tuple[str, Callable[[Mapping[str, Any], int], dict]]] = {
    "sections": ("sections", _section),
    "items": ("items", _item),
    "contacts": ("contacts", _contact),
}


def _entries(value: Any, normalise: Callable, field: str) -> list[dict[str, Any]]:
    if isinstance(value, list):
        raw = value
    else:
        raw = decode_or_default(value, field=field, expected=list)
    entries = [entry for entry in raw if isinstance(entry, Mapping)]
    return [normalise(entry, index) for index, entry in enumerate(entries)]


def guide_to_view_model(source: Any) -> dict[str, Any]:
    """Convert a stored guide row into the nested form view model."""
    record = as_record(source)
    coordinates = decode_or_default(record.get("coordinates"), field="coordinates")

    view: dict[str, Any] = {
        "id": text(record.get("id")),
        "title": text(record.get("title")),
        "category": text(record.get("category")),
    }
    for key, column in _OPTIONAL_TEXT_FIELDS.items():
        view[key] = text(record.get(column))
    for key, column in _STRING_LIST_FIELDS.items():
        view[key] = string_list(record.get(column), field=column)
    for key, (column, normalise) in _ENTRY_LISTS.items():
        view[key] = _entries(record.get(column), normalise, column)
    for key, column in _FREE_LIST_FIELDS.items():
        view[key] = string_list(record.get(column), field=column)
    view.update(
        {
            "rating": number(record.get("rating")),
            "reviews": number(record.get("reviews")),
            "isFeatured": flag(record.get("is_featured")),
            "coordinates": {
                "latitude": number(coordinates.get("latitude")),
                "longitude": number(coordinates.get("longitude")),
            },
            "practicalInfo": decode_or_default(
                record.get("practical_info"), field="practical_info"
            ),
            "createdAt": iso_timestamp(record.get("created_at")),
            "updatedAt": iso_timestamp(record.get("updated_at")),
        }
    )
    return view


def guide_to_record(view: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten a full or partial guide view model into writable columns."""
    record: dict[str, Any] = {}

    for key in ("title", "category"):
        if key in view:
            record[key] = text(view[key]).strip()
    for key, column in _OPTIONAL_TEXT_FIELDS.items():
        if key in view:
            record[column] = optional_text(view[key])
    for key, column in _STRING_LIST_FIELDS.items():
        if key in view:
            record[column] = _split(view[key])
    for key, (column, normalise) in _ENTRY_LISTS.items():
        if key in view:
            record[column] = _entries(view[key], normalise, column)
    for key, column in _FREE_LIST_FIELDS.items():
        if key in view:
            record[column] = list(view[key] or [])

    if "rating" in view:
        record["rating"] = None if view["rating"] is None else float(view["rating"])
    if "reviews" in view:
        record["reviews"] = None if view["reviews"] is None else int(view["reviews"])
    if "isFeatured" in view:
        record["is_featured"] = flag(view["isFeatured"])
    if "coordinates" in view:
        coordinates = nested(view, "coordinates")
        record["coordinates"] = {
            key: float(coordinates[key])
            for key in ("latitude", "longitude")
            if coordinates.get(key) is not None
        }
    if "practicalInfo" in view:
        record["practical_info"] = dict(nested(view, "practicalInfo"))
    return record
