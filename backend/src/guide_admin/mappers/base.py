"""Helpers shared by the record/view-model mappers."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from guide_admin.db.base import Base
from guide_admin.utils.json_fields import decode_or_default


def as_record(source: Any) -> dict[str, Any]:
    """Return a flat record from an ORM row or a mapping."""
    if isinstance(source, Base):
        return source.as_record()
    return dict(source or {})


def text(value: Any) -> str:
    """Missing strings become ""."""
    if value is None:
        return ""
    return str(value)


def number(value: Any) -> Any:
    """Missing or non-numeric values become 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return 0
    return int(parsed) if parsed.is_integer() else parsed


def flag(value: Any) -> bool:
    """Missing booleans become False."""
    return bool(value) if value is not None else False


def string_list(value: Any, field: str = "") -> list[Any]:
    """Missing lists become []; JSON-encoded lists are decoded."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return decode_or_default(value, default=[], field=field, expected=list)


def optional_text(value: Any) -> Optional[str]:
    """Empty strings are written back as NULL for nullable text columns."""
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


def iso_timestamp(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return text(value)


def nested(view: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return a nested view-model object, or {} when absent or None."""
    value = view.get(key)
    return value if isinstance(value, Mapping) else {}
