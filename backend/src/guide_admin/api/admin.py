"""Admin API handlers for the local guide dashboard.

Routes (all under an optional ``/v1`` prefix):

- ``/admin/services``, ``/admin/activities``: paginated CRUD over base items
- ``/admin/guides``: list, view, create, update, delete
- ``/admin/events``: list, view, create, update, sponsorship
- ``/admin/partners``: list, view, create, update, delete, sponsorship
- ``/admin/users``: list, view, profile update, admin toggle
"""

from __future__ import annotations

import time
from typing import Any, Callable, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from guide_admin.actions import (
    create_event_action,
    create_guide_action,
    create_partner_action,
    delete_guide_action,
    delete_partner_action,
    get_event_view,
    get_guide_view,
    get_partner_view,
    get_user_view,
    list_events,
    list_guides,
    list_partners,
    list_users,
    toggle_user_admin_status,
    update_event_action,
    update_event_sponsorship,
    update_guide_action,
    update_partner_action,
    update_partner_sponsorship,
    update_user_profile_action,
)
from guide_admin.api.admin_auth import get_event_principal, require_admin
from guide_admin.api.admin_crud import handle_resource
from guide_admin.api.admin_request import _parse_body, _parse_pagination, _parse_path
from guide_admin.api.admin_resources import get_resource_config
from guide_admin.db.engine import get_engine
from guide_admin.exceptions import AppError, ValidationError
from guide_admin.utils import json_response
from guide_admin.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    log_response,
    set_request_context,
)
from guide_admin.utils.responses import validate_content_type

# Configure logging on module load
configure_logging()
logger = get_logger(__name__)

RouteHandler = Callable[
    [Mapping[str, Any], Session, str, Optional[str], Optional[str], Optional[str]],
    dict[str, Any],
]


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Handle admin dashboard requests."""

    # Set request context for logging
    request_id = event.get("requestContext", {}).get("requestId", "")
    set_request_context(req_id=request_id)
    started = time.perf_counter()
    try:
        response = _dispatch(event)
        log_response(
            logger, response["statusCode"], (time.perf_counter() - started) * 1000
        )
        return response
    finally:
        clear_request_context()


def _dispatch(event: Mapping[str, Any]) -> dict[str, Any]:
    method = event.get("httpMethod", "")
    path = event.get("path", "")
    base_path, resource, resource_id, sub_resource = _parse_path(path)

    # SECURITY: Validate Content-Type for requests with bodies
    try:
        validate_content_type(event)
    except ValidationError as exc:
        logger.warning(f"Content-Type validation failed: {exc.message}")
        return json_response(exc.status_code, exc.to_dict(), event=event)

    logger.info(
        f"Admin request: {method} {path}",
        extra={
            "base_path": base_path,
            "resource": resource,
            "resource_id": resource_id,
        },
    )

    if base_path != "admin":
        return json_response(404, {"error": "Not found"}, event=event)

    handler = _ROUTES.get(resource)
    if handler is None:
        return json_response(404, {"error": "Not found"}, event=event)

    principal = get_event_principal(event)
    user_sub = principal.user_id if principal else None

    def run() -> dict[str, Any]:
        with Session(get_engine()) as session:
            return handler(event, session, method, resource_id, sub_resource, user_sub)

    return _safe_handler(run, event)


# --- Common Error Handling ---


def _safe_handler(
    handler: Callable[[], dict[str, Any]],
    event: Mapping[str, Any],
) -> dict[str, Any]:
    """Execute a handler with common error handling.

    Args:
        handler: The handler function to execute.
        event: The Lambda event for response formatting.

    Returns:
        API Gateway response.
    """
    try:
        return handler()
    except ValidationError as exc:
        logger.warning(f"Validation error: {exc.message}")
        return json_response(exc.status_code, exc.to_dict(), event=event)
    except AppError as exc:
        if exc.status_code >= 500:
            logger.error(f"Application error: {exc.message}")
        return json_response(exc.status_code, exc.to_dict(), event=event)
    except ValueError as exc:
        logger.warning(f"Value error: {exc}")
        return json_response(400, {"error": str(exc)}, event=event)
    except SQLAlchemyError:
        logger.exception("Database error in handler")
        return json_response(500, {"error": "Database error"}, event=event)
    except Exception as exc:  # pragma: no cover
        logger.exception("Unexpected error in handler")
        return json_response(
            500, {"error": "Internal server error", "detail": str(exc)}, event=event
        )


def _action_response(
    result: Mapping[str, Any],
    event: Mapping[str, Any],
    success_status: int = 200,
) -> dict[str, Any]:
    """Convert an action result into an API Gateway response."""
    if result.get("success"):
        if "data" in result:
            body = {key: value for key, value in result.items() if key != "success"}
        else:
            body = dict(result)
        return json_response(success_status, body, event=event)

    body = {"error": result.get("error", "Request failed")}
    if result.get("violations"):
        body["violations"] = result["violations"]
    return json_response(int(result.get("status") or 500), body, event=event)


def _method_not_allowed(event: Mapping[str, Any]) -> dict[str, Any]:
    return json_response(405, {"error": "Method not allowed"}, event=event)


# --- Resource handlers ---


def _handle_item_resource(
    name: str,
    event: Mapping[str, Any],
    session: Session,
    method: str,
    resource_id: Optional[str],
    sub_resource: Optional[str],
    user_sub: Optional[str],
) -> dict[str, Any]:
    require_admin(session, user_sub)
    if sub_resource:
        return json_response(404, {"error": "Not found"}, event=event)
    return handle_resource(
        event, session, method, get_resource_config(name), resource_id
    )


def _handle_services(
    event: Mapping[str, Any],
    session: Session,
    method: str,
    resource_id: Optional[str],
    sub_resource: Optional[str],
    user_sub: Optional[str],
) -> dict[str, Any]:
    return _handle_item_resource(
        "services", event, session, method, resource_id, sub_resource, user_sub
    )


def _handle_activities(
    event: Mapping[str, Any],
    session: Session,
    method: str,
    resource_id: Optional[str],
    sub_resource: Optional[str],
    user_sub: Optional[str],
) -> dict[str, Any]:
    return _handle_item_resource(
        "activities", event, session, method, resource_id, sub_resource, user_sub
    )


def _handle_events(
    event: Mapping[str, Any],
    session: Session,
    method: str,
    resource_id: Optional[str],
    sub_resource: Optional[str],
    user_sub: Optional[str],
) -> dict[str, Any]:
    if resource_id is None:
        if method == "GET":
            page, page_size, search = _parse_pagination(event)
            return _action_response(
                list_events(session, user_sub, page, page_size, search), event
            )
        if method == "POST":
            result = create_event_action(session, user_sub, _parse_body(event))
            return _action_response(result, event, success_status=201)
        return _method_not_allowed(event)

    if sub_resource == "sponsorship":
        if method != "PATCH":
            return _method_not_allowed(event)
        body = _parse_body(event)
        result = update_event_sponsorship(
            session,
            user_sub,
            resource_id,
            body.get("isSponsored"),
            body.get("endDate"),
        )
        return _action_response(result, event)
    if sub_resource:
        return json_response(404, {"error": "Not found"}, event=event)

    if method == "GET":
        return _action_response(get_event_view(session, user_sub, resource_id), event)
    if method == "PATCH":
        result = update_event_action(session, user_sub, resource_id, _parse_body(event))
        return _action_response(result, event)
    return _method_not_allowed(event)


def _handle_guides(
    event: Mapping[str, Any],
    session: Session,
    method: str,
    resource_id: Optional[str],
    sub_resource: Optional[str],
    user_sub: Optional[str],
) -> dict[str, Any]:
    if sub_resource:
        return json_response(404, {"error": "Not found"}, event=event)
    if resource_id is None:
        if method == "GET":
            page, page_size, search = _parse_pagination(event)
            return _action_response(
                list_guides(session, user_sub, page, page_size, search), event
            )
        if method == "POST":
            result = create_guide_action(session, user_sub, _parse_body(event))
            return _action_response(result, event, success_status=201)
        return _method_not_allowed(event)

    if method == "GET":
        return _action_response(get_guide_view(session, user_sub, resource_id), event)
    if method == "PATCH":
        result = update_guide_action(session, user_sub, resource_id, _parse_body(event))
        return _action_response(result, event)
    if method == "DELETE":
        return _action_response(
            delete_guide_action(session, user_sub, resource_id), event
        )
    return _method_not_allowed(event)


def _handle_partners(
    event: Mapping[str, Any],
    session: Session,
    method: str,
    resource_id: Optional[str],
    sub_resource: Optional[str],
    user_sub: Optional[str],
) -> dict[str, Any]:
    if resource_id is None:
        if method == "GET":
            page, page_size, search = _parse_pagination(event)
            return _action_response(
                list_partners(session, user_sub, page, page_size, search), event
            )
        if method == "POST":
            result = create_partner_action(session, user_sub, _parse_body(event))
            return _action_response(result, event, success_status=201)
        return _method_not_allowed(event)

    if sub_resource == "sponsorship":
        if method != "PATCH":
            return _method_not_allowed(event)
        body = _parse_body(event)
        result = update_partner_sponsorship(
            session,
            user_sub,
            resource_id,
            body.get("isSponsored"),
            body.get("endDate"),
        )
        return _action_response(result, event)
    if sub_resource:
        return json_response(404, {"error": "Not found"}, event=event)

    if method == "GET":
        return _action_response(
            get_partner_view(session, user_sub, resource_id), event
        )
    if method == "PATCH":
        result = update_partner_action(
            session, user_sub, resource_id, _parse_body(event)
        )
        return _action_response(result, event)
    if method == "DELETE":
        return _action_response(
            delete_partner_action(session, user_sub, resource_id), event
        )
    return _method_not_allowed(event)


def _handle_users(
    event: Mapping[str, Any],
    session: Session,
    method: str,
    resource_id: Optional[str],
    sub_resource: Optional[str],
    user_sub: Optional[str],
) -> dict[str, Any]:
    if resource_id is None:
        if method == "GET":
            page, page_size, search = _parse_pagination(event)
            return _action_response(
                list_users(session, user_sub, page, page_size, search), event
            )
        return _method_not_allowed(event)

    if sub_resource == "admin":
        if method != "PUT":
            return _method_not_allowed(event)
        body = _parse_body(event)
        result = toggle_user_admin_status(
            session, user_sub, resource_id, body.get("isAdmin")
        )
        return _action_response(result, event)
    if sub_resource:
        return json_response(404, {"error": "Not found"}, event=event)

    if method == "GET":
        return _action_response(get_user_view(session, user_sub, resource_id), event)
    if method == "PATCH":
        result = update_user_profile_action(
            session, user_sub, resource_id, _parse_body(event)
        )
        return _action_response(result, event)
    return _method_not_allowed(event)


_ROUTES: dict[str, RouteHandler] = {
    "services": _handle_services,
    "activities": _handle_activities,
    "guides": _handle_guides,
    "events": _handle_events,
    "partners": _handle_partners,
    "users": _handle_users,
}
