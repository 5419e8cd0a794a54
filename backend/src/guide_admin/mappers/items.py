"""Shared mapping for base item rows (services, activities).

An item is a ``base_items`` row plus a details row. The flat record used
by the item mappers merges both: base item columns plus ``category``,
``subcategory`` and the details row's JSON data column.
"""

from __future__ import annotations

from typing import Any, Mapping

from guide_admin.db.models import BaseItem
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

CONTACT_KEYS = ("phone", "email", "website", "lineId", "facebook", "instagram")
PAYMENT_METHOD_KEYS = ("cash", "card", "mobilePay")
ACCESSIBILITY_KEYS = ("wheelchairAccessible", "familyFriendly", "petFriendly")

_OPTIONAL_TEXT_FIELDS = {
    "subcategory": "subcategory",
    "shortDescription": "short_description",
    "longDescription": "long_description",
    "mainImage": "main_image",
    "address": "address",
    "area": "area",
    "hours": "hours",
    "priceRange": "price_range",
    "currency": "currency",
}
_FLAG_FIELDS = {
    "open24h": "open_24h",
    "isSponsored": "is_sponsored",
    "isFeatured": "is_featured",
}
_LIST_FIELDS = {
    "galleryImages": "gallery_images",
    "tags": "tags",
    "features": "features",
    "languages": "languages",
}
_JSON_COLUMNS = ("coordinates", "contact_info", "payment_methods", "accessibility")


def item_record(source: Any, details_attr: str, data_column: str) -> dict[str, Any]:
    """Merge a base item and its details row into one flat record."""
    if isinstance(source, BaseItem):
        record = source.as_record()
        details = getattr(source, details_attr)
        record["category"] = details.category if details else None
        record["subcategory"] = details.subcategory if details else None
        record[data_column] = getattr(details, data_column) if details else None
        return record
    return as_record(source)


def item_response(record: dict[str, Any], data_column: str) -> dict[str, Any]:
    """Flat record for REST responses, with JSON columns decoded."""
    for column in (*_JSON_COLUMNS, data_column):
        record[column] = decode_or_default(record.get(column), field=column)
    for column in _LIST_FIELDS.values():
        record[column] = string_list(record.get(column), field=column)
    record["id"] = text(record.get("id"))
    return record


def item_view_model(record: Mapping[str, Any]) -> dict[str, Any]:
    """View model fields shared by every item kind."""
    coordinates = decode_or_default(record.get("coordinates"), field="coordinates")
    contact = decode_or_default(record.get("contact_info"), field="contact_info")
    payment = decode_or_default(record.get("payment_methods"), field="payment_methods")
    accessibility = decode_or_default(
        record.get("accessibility"), field="accessibility"
    )

    view: dict[str, Any] = {
        "id": text(record.get("id")),
        "name": text(record.get("name")),
        "category": text(record.get("category")),
    }
    for key, column in _OPTIONAL_TEXT_FIELDS.items():
        view[key] = text(record.get(column))
    for key, column in _FLAG_FIELDS.items():
        view[key] = flag(record.get(column))
    for key, column in _LIST_FIELDS.items():
        view[key] = string_list(record.get(column), field=column)
    view.update(
        {
            "coordinates": {
                "latitude": number(coordinates.get("latitude")),
                "longitude": number(coordinates.get("longitude")),
            },
            "contactInfo": {key: text(contact.get(key)) for key in CONTACT_KEYS},
            "rating": number(record.get("rating")),
            "paymentMethods": {key: flag(payment.get(key)) for key in PAYMENT_METHOD_KEYS},
            "accessibility": {
                key: flag(accessibility.get(key)) for key in ACCESSIBILITY_KEYS
            },
            "createdAt": iso_timestamp(record.get("created_at")),
            "updatedAt": iso_timestamp(record.get("updated_at")),
        }
    )
    return view


def item_to_record(view: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten the shared item keys of a full or partial view model."""
    record: dict[str, Any] = {}

    if "name" in view:
        record["name"] = text(view["name"]).strip()
    if "category" in view:
        record["category"] = text(view["category"])

    for key, column in _OPTIONAL_TEXT_FIELDS.items():
        if key in view:
            record[column] = optional_text(view[key])
    for key, column in _FLAG_FIELDS.items():
        if key in view:
            record[column] = flag(view[key])
    for key, column in _LIST_FIELDS.items():
        if key in view:
            record[column] = list(view[key] or [])

    if "coordinates" in view:
        coordinates = nested(view, "coordinates")
        record["coordinates"] = {
            key: float(coordinates[key])
            for key in ("latitude", "longitude")
            if coordinates.get(key) is not None
        }
    if "contactInfo" in view:
        contact = nested(view, "contactInfo")
        record["contact_info"] = {
            key: text(contact[key]) for key in CONTACT_KEYS if contact.get(key)
        }
    if "rating" in view:
        record["rating"] = None if view["rating"] is None else float(view["rating"])
    if "paymentMethods" in view:
        payment = nested(view, "paymentMethods")
        record["payment_methods"] = {
            key: flag(payment.get(key)) for key in PAYMENT_METHOD_KEYS
        }
    if "accessibility" in view:
        accessibility = nested(view, "accessibility")
        record["accessibility"] = {
            key: flag(accessibility.get(key)) for key in ACCESSIBILITY_KEYS
        }
    return record
