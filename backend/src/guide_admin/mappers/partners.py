"""Mapping between flat partner rows and the nested partner view model."""

from __future__ import annotations

from typing import Any, Mapping

from guide_admin.mappers.attributes import shape_partner_attributes
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

SOCIAL_KEYS = ("facebook", "instagram", "twitter")
ACCESSIBILITY_KEYS = ("wheelchairAccessible", "familyFriendly", "petFriendly")
PAYMENT_FLAG_KEYS = ("cash", "creditCard", "mobilePay", "cryptoCurrency")

# (view object, view key) -> nullable text column
_OPTIONAL_TEXT_FIELDS: dict[tuple[str, str], str] = {
    ("images", "main"): "main_image",
    ("description", "short"): "short_description",
    ("description", "long"): "long_description",
    ("location", "address"): "address",
    ("location", "area"): "area",
    ("contact", "phone"): "phone",
    ("contact", "email"): "email",
    ("contact", "website"): "website",
    ("contact", "lineId"): "line_id",
    ("hours", "regularHours"): "regular_hours",
    ("hours", "seasonalChanges"): "seasonal_changes",
    ("prices", "priceRange"): "price_range",
    ("prices", "currency"): "currency",
    ("promotion", "promotionEndsAt"): "sponsor_end_date",
}
_FLAG_FIELDS: dict[tuple[str, str], str] = {
    ("hours", "open24h"): "open_24h",
    ("promotion", "isSponsored"): "is_sponsored",
    ("promotion", "isFeatured"): "is_featured",
}


def partner_to_view_model(source: Any) -> dict[str, Any]:
    """Convert a stored partner row into the nested form view model."""
    record = as_record(source)
    social = decode_or_default(record.get("social"), field="social")
    accessibility = decode_or_default(
        record.get("accessibility"), field="accessibility"
    )
    payment = decode_or_default(record.get("payment_options"), field="payment_options")
    attributes = decode_or_default(record.get("attributes"), field="attributes")

    payment_options: dict[str, Any] = {
        key: flag(payment.get(key)) for key in PAYMENT_FLAG_KEYS
    }
    payment_options["acceptedCards"] = string_list(
        payment.get("acceptedCards"), field="acceptedCards"
    )

    return {
        "id": text(record.get("id")),
        "name": text(record.get("name")),
        "section": text(record.get("section")),
        "mainCategory": text(record.get("main_category")),
        "subcategory": text(record.get("subcategory")),
        "images": {
            "main": text(record.get("main_image")),
            "gallery": string_list(record.get("gallery"), field="gallery"),
        },
        "description": {
            "short": text(record.get("short_description")),
            "long": text(record.get("long_description")),
        },
        "location": {
            "address": text(record.get("address")),
            "coordinates": {
                "latitude": number(record.get("latitude")),
                "longitude": number(record.get("longitude")),
            },
            "area": text(record.get("area")),
        },
        "contact": {
            "phone": text(record.get("phone")),
            "email": text(record.get("email")),
            "website": text(record.get("website")),
            "lineId": text(record.get("line_id")),
            "social": {key: text(social.get(key)) for key in SOCIAL_KEYS},
        },
        "hours": {
            "regularHours": text(record.get("regular_hours")),
            "seasonalChanges": text(record.get("seasonal_changes")),
            "open24h": flag(record.get("open_24h")),
        },
        "rating": {
            "score": number(record.get("rating")),
            "reviewCount": number(record.get("review_count")),
        },
        "tags": string_list(record.get("tags"), field="tags"),
        "prices": {
            "priceRange": text(record.get("price_range")),
            "currency": text(record.get("currency")),
        },
        "features": string_list(record.get("features"), field="features"),
        "languages": string_list(record.get("languages"), field="languages"),
        "promotion": {
            "isSponsored": flag(record.get("is_sponsored")),
            "isFeatured": flag(record.get("is_featured")),
            "promotionEndsAt": text(record.get("sponsor_end_date")),
        },
        "accessibility": {key: flag(accessibility.get(key)) for key in ACCESSIBILITY_KEYS},
        "paymentOptions": payment_options,
        "attributes": attributes or None,
        "createdAt": iso_timestamp(record.get("created_at")),
        "updatedAt": iso_timestamp(record.get("updated_at")),
    }


def partner_to_record(view: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten a partner view model into writable columns.

    When ``attributeInputs`` is present, the stored attributes are shaped
    from those inputs for the view model's section and main category;
    otherwise an explicit ``attributes`` object is stored as given.
    Only keys present in ``view`` produce columns.
    """
    record: dict[str, Any] = {}

    if "name" in view:
        record["name"] = text(view["name"]).strip()
    if "section" in view:
        record["section"] = text(view["section"])
    if "mainCategory" in view:
        record["main_category"] = text(view["mainCategory"])
    if "subcategory" in view:
        record["subcategory"] = optional_text(view["subcategory"])

    for (group, key), column in _OPTIONAL_TEXT_FIELDS.items():
        values = nested(view, group)
        if key in values:
            record[column] = optional_text(values[key])

    for (group, key), column in _FLAG_FIELDS.items():
        values = nested(view, group)
        if key in values:
            record[column] = flag(values[key])

    images = nested(view, "images")
    if "gallery" in images:
        record["gallery"] = list(images["gallery"] or [])

    coordinates = nested(nested(view, "location"), "coordinates")
    for key in ("latitude", "longitude"):
        if key in coordinates:
            value = coordinates[key]
            record[key] = None if value is None else float(value)

    contact = nested(view, "contact")
    if "social" in contact:
        social = nested(contact, "social")
        record["social"] = {key: value for key, value in social.items() if value}

    rating = nested(view, "rating")
    if "score" in rating:
        record["rating"] = None if rating["score"] is None else float(rating["score"])
    if "reviewCount" in rating:
        count = rating["reviewCount"]
        record["review_count"] = None if count is None else int(count)

    for key in ("tags", "features", "languages"):
        if key in view:
            record[key] = list(view[key] or [])

    if "accessibility" in view:
        accessibility = nested(view, "accessibility")
        record["accessibility"] = {
            key: flag(accessibility.get(key)) for key in ACCESSIBILITY_KEYS
        }

    if "paymentOptions" in view:
        payment = nested(view, "paymentOptions")
        stored: dict[str, Any] = {key: flag(payment.get(key)) for key in PAYMENT_FLAG_KEYS}
        stored["acceptedCards"] = list(payment.get("acceptedCards") or [])
        record["payment_options"] = stored

    if "attributeInputs" in view:
        attributes = shape_partner_attributes(
            view.get("section"),
            view.get("mainCategory"),
            nested(view, "attributeInputs"),
        )
        record["attributes"] = encode_json_field(attributes)
    elif "attributes" in view:
        record["attributes"] = encode_json_field(view["attributes"] or None)

    return record
