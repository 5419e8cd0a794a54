"""Plumbing shared by the action dispatchers.

Actions are plain functions taking a database session and the acting
user's id. They never raise across their boundary: every outcome is a
dict with ``success`` and, on failure, ``error`` plus an optional HTTP
``status`` and field ``violations``.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from guide_admin.api.admin_auth import Ok, check_admin
from guide_admin.exceptions import AppError
from guide_admin.schemas import validate_form
from guide_admin.utils.logging import get_logger

logger = get_logger(__name__)

MAX_PAGE_SIZE = 100


def failure(
    error: str,
    status: Optional[int] = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a failure result."""
    result: dict[str, Any] = {"success": False, "error": error}
    if status is not None:
        result["status"] = status
    result.update(extra)
    return result


def guard(session: Session, user_sub: Optional[str]) -> Optional[dict[str, Any]]:
    """Run the admin guard; return a failure result when access is denied."""
    result = check_admin(session, user_sub)
    if isinstance(result, Ok):
        return None
    return failure(result.reason, status=result.status_code)


def validation_failure(
    schema: type[BaseModel],
    data: Mapping[str, Any],
    fields: Optional[Iterable[str]] = None,
) -> Optional[dict[str, Any]]:
    """Validate view-model data; return a failure result on violations.

    ``fields`` limits the check to the top-level keys an update changes.
    """
    violations = validate_form(schema, data, fields)
    if not violations:
        return None
    logger.info(
        "Form validation failed",
        extra={"schema": schema.__name__, "fields": [v.field for v in violations]},
    )
    return failure(
        "Validation failed",
        status=400,
        violations=[violation.to_dict() for violation in violations],
    )


def persistence_failure(
    session: Session,
    exc: Exception,
    action: str,
    **context: Any,
) -> dict[str, Any]:
    """Roll back, log with context, and convert an exception to a result."""
    session.rollback()
    logger.exception(f"Error {action}", extra=context)
    if isinstance(exc, AppError):
        return failure(exc.message, status=exc.status_code)
    if isinstance(exc, SQLAlchemyError):
        return failure(f"Database error while {action}", status=500)
    return failure(str(exc) or f"Unexpected error while {action}", status=500)


def parse_entity_id(value: Any) -> Optional[UUID]:
    """Parse a UUID entity id, returning None when malformed."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None


def not_found(resource: str, identifier: Any) -> dict[str, Any]:
    return failure(f"{resource} not found: {identifier}", status=404)


def deep_merge(base: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Merge a partial view model over a full one, recursing into objects."""
    merged = dict(base)
    for key, value in patch.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def patch_view(
    current: Mapping[str, Any],
    patch: Mapping[str, Any],
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return (merged view model, patched top-level keys with merged values).

    The second view model drives ``to_record`` so nested objects are
    written whole while untouched top-level keys are left alone.
    """
    merged = deep_merge(current, patch)
    touched = {key: merged[key] for key in patch}
    return merged, touched


def check_pagination(page: int, page_size: int) -> Optional[dict[str, Any]]:
    if page < 1:
        return failure("page must be at least 1", status=400)
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        return failure(
            f"pageSize must be between 1 and {MAX_PAGE_SIZE}", status=400
        )
    return None


def page_meta(total: int, page: int, page_size: int) -> dict[str, int]:
    """Pagination metadata returned with list results."""
    return {
        "total": total,
        "page": page,
        "pageSize": page_size,
        "pageCount": math.ceil(total / page_size) if page_size else 0,
    }
