"""Shared CRUD handlers for base item resources.

Items are stored as a ``base_items`` row plus a details row. Request
bodies use the item view model; list and write responses return the
flat record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from guide_admin.actions.base import page_meta, parse_entity_id, patch_view
from guide_admin.api.admin_request import _parse_body, _parse_pagination, _query_param
from guide_admin.db.models import BaseItem
from guide_admin.db.repositories import BaseItemRepository
from guide_admin.exceptions import NotFoundError, ValidationError
from guide_admin.schemas import validate_form
from guide_admin.services.cache import invalidate_many, item_tag, list_tag
from guide_admin.utils import json_response
from guide_admin.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResourceConfig:
    """Configuration for a base item resource."""

    name: str
    entity: str
    repository_class: Type[BaseItemRepository]
    form: Type[BaseModel]
    to_view_model: Callable[[Any], dict[str, Any]]
    to_record: Callable[..., dict[str, Any]]
    to_response: Callable[[Any], dict[str, Any]]


def handle_resource(
    event: Mapping[str, Any],
    session: Session,
    method: str,
    config: ResourceConfig,
    resource_id: Optional[str],
) -> dict[str, Any]:
    """Dispatch a resource request. The caller has passed the admin guard."""
    repo = config.repository_class(session)
    if resource_id is None:
        if method == "GET":
            return _crud_list(event, config, repo)
        if method == "POST":
            return _crud_post(event, session, config, repo)
    else:
        if method == "GET":
            entity = _get_entity(config, repo, resource_id)
            return json_response(
                200, {"data": config.to_view_model(entity)}, event=event
            )
        if method == "PATCH":
            return _crud_patch(event, session, config, repo, resource_id)
        if method == "DELETE":
            return _crud_delete(event, session, config, repo, resource_id)
    return json_response(405, {"error": "Method not allowed"}, event=event)


def _validate(
    config: ResourceConfig,
    data: Mapping[str, Any],
    fields: Optional[Any] = None,
) -> None:
    violations = validate_form(config.form, data, fields)
    if violations:
        raise ValidationError(
            "Validation failed",
            violations=[violation.to_dict() for violation in violations],
        )


def _get_entity(
    config: ResourceConfig,
    repo: BaseItemRepository,
    resource_id: str,
) -> BaseItem:
    parsed_id = parse_entity_id(resource_id)
    entity = repo.get_by_id(parsed_id) if parsed_id else None
    if entity is None:
        raise NotFoundError(config.name, resource_id)
    return entity


def _invalidate(config: ResourceConfig, entity_id: str) -> None:
    invalidate_many(list_tag(config.entity), item_tag(config.entity, entity_id))


def _crud_list(
    event: Mapping[str, Any],
    config: ResourceConfig,
    repo: BaseItemRepository,
) -> dict[str, Any]:
    page, page_size, search = _parse_pagination(event)
    category = (_query_param(event, "category") or "").strip() or None
    rows, total = repo.for_category(category).get_page(page, page_size, search)
    return json_response(
        200,
        {
            "data": [config.to_response(row) for row in rows],
            "meta": page_meta(total, page, page_size),
        },
        event=event,
    )


def _crud_post(
    event: Mapping[str, Any],
    session: Session,
    config: ResourceConfig,
    repo: BaseItemRepository,
) -> dict[str, Any]:
    body = _parse_body(event)
    _validate(config, body)

    record = config.to_record(body)
    entity = repo.create_item(record, record)
    session.commit()
    entity_id = str(entity.id)
    logger.info(
        f"Created {config.entity} {entity_id}",
        extra={"resource": config.name, "entity_id": entity_id},
    )
    _invalidate(config, entity_id)
    return json_response(201, {"data": config.to_response(entity)}, event=event)


def _crud_patch(
    event: Mapping[str, Any],
    session: Session,
    config: ResourceConfig,
    repo: BaseItemRepository,
    resource_id: str,
) -> dict[str, Any]:
    entity = _get_entity(config, repo, resource_id)
    body = _parse_body(event)
    merged, touched = patch_view(config.to_view_model(entity), body)
    _validate(config, merged, touched)

    record = config.to_record(touched, category=merged["category"])
    repo.update_item(entity, record, record)
    session.commit()
    _invalidate(config, str(entity.id))
    return json_response(200, {"data": config.to_response(entity)}, event=event)


def _crud_delete(
    event: Mapping[str, Any],
    session: Session,
    config: ResourceConfig,
    repo: BaseItemRepository,
    resource_id: str,
) -> dict[str, Any]:
    entity = _get_entity(config, repo, resource_id)
    entity_id = str(entity.id)
    repo.delete(entity)
    session.commit()
    logger.info(
        f"Deleted {config.entity} {entity_id}",
        extra={"resource": config.name, "entity_id": entity_id},
    )
    _invalidate(config, entity_id)
    return json_response(200, {"success": True}, event=event)
