"""Mapping between activity rows and the activity view model.

Activities share the base item columns with services. Their
``activityData`` bag is free-form and stored as given.
"""

from __future__ import annotations

from typing import Any, Mapping

from guide_admin.mappers.base import nested
from guide_admin.mappers.items import (
    item_record,
    item_response,
    item_to_record,
    item_view_model,
)
from guide_admin.utils.json_fields import decode_or_default, encode_json_field


def activity_record(source: Any) -> dict[str, Any]:
    return item_record(source, "activity", "activity_data")


def activity_to_response(source: Any) -> dict[str, Any]:
    return item_response(activity_record(source), "activity_data")


def activity_to_view_model(source: Any) -> dict[str, Any]:
    record = activity_record(source)
    view = item_view_model(record)
    view["activityData"] = decode_or_default(
        record.get("activity_data"), field="activity_data"
    )
    return view


def activity_to_record(
    view: Mapping[str, Any],
    category: Any = None,
) -> dict[str, Any]:
    """Flatten a full or partial activity view model.

    ``category`` is unused: activity data is not shaped by category.
    """
    record = item_to_record(view)
    if "activityData" in view:
        record["activity_data"] = encode_json_field(dict(nested(view, "activityData")))
    return record
