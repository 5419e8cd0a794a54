"""Mapping between service rows and the service view model.

The flat service record is the base item columns plus ``category``,
``subcategory`` and ``service_data`` from the ``services`` row.
"""

from __future__ import annotations

from typing import Any, Mapping

from guide_admin.mappers.attributes import shape_service_data
from guide_admin.mappers.base import nested
from guide_admin.mappers.items import (
    item_record,
    item_response,
    item_to_record,
    item_view_model,
)
from guide_admin.utils.json_fields import decode_or_default, encode_json_field


def service_record(source: Any) -> dict[str, Any]:
    """Merge a base item and its service details into one flat record."""
    return item_record(source, "service", "service_data")


def service_to_response(source: Any) -> dict[str, Any]:
    return item_response(service_record(source), "service_data")


def service_to_view_model(source: Any) -> dict[str, Any]:
    """Convert a stored service into the form view model."""
    record = service_record(source)
    view = item_view_model(record)
    service_data = decode_or_default(record.get("service_data"), field="service_data")
    view["serviceData"] = shape_service_data(record.get("category"), service_data)
    return view


def service_to_record(
    view: Mapping[str, Any],
    category: Any = None,
) -> dict[str, Any]:
    """Flatten a service view model into base item and details columns.

    Args:
        view: Full or partial service view model.
        category: Current category, used to shape ``serviceData`` when
            the view model does not carry one.
    """
    record = item_to_record(view)
    if "serviceData" in view:
        shaped = shape_service_data(
            view.get("category", category), nested(view, "serviceData")
        )
        record["service_data"] = encode_json_field(shaped)
    return record
