"""Mapping between profile rows and the profile view model."""

from __future__ import annotations

from typing import Any, Mapping

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

SOCIAL_LINK_KEYS = ("facebook", "instagram", "twitter", "lineId")
NOTIFICATION_KEYS = (
    "events",
    "messages",
    "updates",
    "partnersDeals",
    "pushEnabled",
    "emailDigest",
)
PRIVACY_FLAG_KEYS = ("showLocation", "showInterests", "showAttendedEvents")
ACCESSIBILITY_PREFERENCE_KEYS = ("wheelchair", "petFriendly", "familyFriendly")
PREFERENCE_LIST_KEYS = (
    "eventCategories",
    "guideCategories",
    "partnerCategories",
    "priceRanges",
)

_OPTIONAL_TEXT_FIELDS = {
    "name": "name",
    "username": "username",
    "email": "email",
    "bio": "bio",
    "location": "location",
    "avatarUrl": "avatar_url",
}


def _preferences(raw: Mapping[str, Any]) -> dict[str, Any]:
    accessibility = raw.get("accessibility")
    accessibility = accessibility if isinstance(accessibility, Mapping) else {}
    preferences: dict[str, Any] = {
        "accessibility": {
            key: flag(accessibility.get(key)) for key in ACCESSIBILITY_PREFERENCE_KEYS
        }
    }
    for key in PREFERENCE_LIST_KEYS:
        preferences[key] = string_list(raw.get(key), field=key)
    return preferences


def _payment_methods(raw: Mapping[str, Any]) -> dict[str, Any]:
    cards = []
    for card in raw.get("cards") or []:
        if isinstance(card, Mapping):
            cards.append(
                {
                    "type": text(card.get("type")),
                    "lastFour": text(card.get("lastFour")),
                    "expiryDate": text(card.get("expiryDate")),
                }
            )
    return {
        "cards": cards,
        "mobilePay": flag(raw.get("mobilePay")),
        "cryptocurrencies": flag(raw.get("cryptocurrencies")),
    }


def _privacy(raw: Mapping[str, Any]) -> dict[str, Any]:
    privacy: dict[str, Any] = {
        "profileVisibility": text(raw.get("profileVisibility")) or "public",
    }
    for key in PRIVACY_FLAG_KEYS:
        privacy[key] = flag(raw.get(key))
    return privacy


def profile_to_view_model(source: Any) -> dict[str, Any]:
    """Convert a stored profile row into the view model."""
    record = as_record(source)
    social = decode_or_default(record.get("social_links"), field="social_links")
    notifications = decode_or_default(
        record.get("notifications"), field="notifications"
    )
    join_date = record.get("join_date") or record.get("created_at")

    view: dict[str, Any] = {"id": text(record.get("id"))}
    for key, column in _OPTIONAL_TEXT_FIELDS.items():
        view[key] = text(record.get(column))
    view.update(
        {
            "isAdmin": flag(record.get("is_admin")),
            "interests": string_list(record.get("interests"), field="interests"),
            "favoritePlaces": string_list(
                record.get("favorite_places"), field="favorite_places"
            ),
            "preferences": _preferences(
                decode_or_default(record.get("preferences"), field="preferences")
            ),
            "socialLinks": {key: text(social.get(key)) for key in SOCIAL_LINK_KEYS},
            "privacySettings": _privacy(
                decode_or_default(
                    record.get("privacy_settings"), field="privacy_settings"
                )
            ),
            "notifications": {
                key: flag(notifications.get(key)) for key in NOTIFICATION_KEYS
            },
            "paymentMethods": _payment_methods(
                decode_or_default(record.get("payment_methods"), field="payment_methods")
            ),
            "eventsAttended": number(record.get("events_attended")),
            "joinDate": iso_timestamp(join_date),
            "createdAt": iso_timestamp(record.get("created_at")),
        }
    )
    return view


def profile_to_record(view: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten a profile view model into writable columns.

    ``isAdmin`` is never written here; admin status changes go through
    the dedicated toggle action.
    """
    record: dict[str, Any] = {}
    for key, column in _OPTIONAL_TEXT_FIELDS.items():
        if key in view:
            record[column] = optional_text(view[key])
    if "interests" in view:
        record["interests"] = list(view["interests"] or [])
    if "favoritePlaces" in view:
        record["favorite_places"] = list(view["favoritePlaces"] or [])
    if "preferences" in view:
        record["preferences"] = _preferences(nested(view, "preferences"))
    if "socialLinks" in view:
        social = nested(view, "socialLinks")
        record["social_links"] = {
            key: text(social[key]) for key in SOCIAL_LINK_KEYS if social.get(key)
        }
    if "privacySettings" in view:
        record["privacy_settings"] = _privacy(nested(view, "privacySettings"))
    if "notifications" in view:
        notifications = nested(view, "notifications")
        record["notifications"] = {
            key: flag(notifications.get(key)) for key in NOTIFICATION_KEYS
        }
    if "paymentMethods" in view:
        record["payment_methods"] = _payment_methods(nested(view, "paymentMethods"))
    return record
