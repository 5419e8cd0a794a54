"""Request parsing helpers for admin APIs."""

from __future__ import annotations

import base64
import json
from typing import Any, Mapping, Optional, Tuple

from guide_admin.exceptions import ValidationError
from guide_admin.utils.parsers import collect_query_params, first_param, parse_int

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def _parse_body(event: Mapping[str, Any]) -> dict[str, Any]:
    """Parse JSON request body."""
    raw = event.get("body") or ""
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    if not raw:
        raise ValidationError("Request body is required")
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError("Request body must be valid JSON") from exc
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def _parse_path(path: str) -> Tuple[str, str, Optional[str], Optional[str]]:
    """Parse base path, resource name, and id from the request path.

    Returns:
        Tuple of (base_path, resource, resource_id, sub_resource)
        base_path is "admin" for admin routes and "" otherwise
    """
    parts = [segment for segment in path.split("/") if segment]
    parts = _strip_version_prefix(parts)

    if not parts or parts[0] != "admin":
        return "", "", None, None

    resource = parts[1] if len(parts) > 1 else ""
    resource_id = parts[2] if len(parts) > 2 else None
    sub_resource = parts[3] if len(parts) > 3 else None
    return "admin", resource, resource_id, sub_resource


def _strip_version_prefix(parts: list[str]) -> list[str]:
    """Drop an optional version prefix from path segments."""
    if parts and _is_version_segment(parts[0]):
        return parts[1:]
    return parts


def _is_version_segment(segment: str) -> bool:
    """Return True if the path segment matches v{number}."""
    return segment.startswith("v") and segment[1:].isdigit()


def _query_param(event: Mapping[str, Any], name: str) -> Optional[str]:
    """Return a query parameter value."""
    params = collect_query_params(event)
    return first_param(params, name)


def _parse_int_param(event: Mapping[str, Any], name: str, default: int) -> int:
    try:
        value = parse_int(_query_param(event, name))
    except ValueError as exc:
        raise ValidationError(f"{name} must be an integer", field=name) from exc
    return default if value is None else value


def _parse_pagination(event: Mapping[str, Any]) -> Tuple[int, int, Optional[str]]:
    """Parse page, pageSize and search query parameters.

    Raises:
        ValidationError: If page is below 1 or pageSize is out of range.
    """
    page = _parse_int_param(event, "page", 1)
    page_size = _parse_int_param(event, "pageSize", DEFAULT_PAGE_SIZE)
    if page < 1:
        raise ValidationError("page must be at least 1", field="page")
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise ValidationError(
            f"pageSize must be between 1 and {MAX_PAGE_SIZE}", field="pageSize"
        )
    search = (_query_param(event, "search") or "").strip() or None
    return page, page_size, search
