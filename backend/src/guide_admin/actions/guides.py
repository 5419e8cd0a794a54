"""Admin actions for guides."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from guide_admin.actions.base import (
    check_pagination,
    failure,
    guard,
    not_found,
    page_meta,
    parse_entity_id,
    patch_view,
    persistence_failure,
    validation_failure,
)
from guide_admin.db.models import Guide
from guide_admin.db.repositories import GuideRepository
from guide_admin.mappers import guide_to_record, guide_to_view_model
from guide_admin.schemas import GuideForm
from guide_admin.services.cache import invalidate_many, item_tag, list_tag
from guide_admin.utils.logging import get_logger

logger = get_logger(__name__)

ENTITY = "guide"


def _invalidate(guide_id: str) -> None:
    invalidate_many(list_tag(ENTITY), item_tag(ENTITY, guide_id))


def _load(repository: GuideRepository, guide_id: Any) -> Optional[Guide]:
    parsed_id = parse_entity_id(guide_id)
    return repository.get_by_id(parsed_id) if parsed_id else None


def _slug_taken(
    repository: GuideRepository,
    record: Mapping[str, Any],
    own_id: Any = None,
) -> Optional[dict[str, Any]]:
    slug = record.get("slug")
    if not slug:
        return None
    existing = repository.get_by_slug(slug)
    if existing is None or existing.id == own_id:
        return None
    return failure(f"Slug already in use: {slug}", status=409)


def create_guide_action(
    session: Session,
    user_sub: Optional[str],
    data: Mapping[str, Any],
) -> dict[str, Any]:
    """Validate and insert a new guide."""
    denied = guard(session, user_sub)
    if denied:
        return denied
    invalid = validation_failure(GuideForm, data)
    if invalid:
        return invalid

    repository = GuideRepository(session)
    record = guide_to_record(data)
    taken = _slug_taken(repository, record)
    if taken:
        return taken
    try:
        guide = repository.create_from_record(record)
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "creating guide", title=data.get("title")
        )

    guide_id = str(guide.id)
    logger.info(f"Created guide {guide_id}", extra={"guide_id": guide_id})
    _invalidate(guide_id)
    return {"success": True, "guideId": guide_id}


def update_guide_action(
    session: Session,
    user_sub: Optional[str],
    guide_id: Any,
    data: Mapping[str, Any],
) -> dict[str, Any]:
    """Apply a partial view model to an existing guide."""
    denied = guard(session, user_sub)
    if denied:
        return denied
    repository = GuideRepository(session)
    guide = _load(repository, guide_id)
    if guide is None:
        return not_found("Guide", guide_id)

    merged, touched = patch_view(guide_to_view_model(guide), data)
    invalid = validation_failure(GuideForm, merged, touched)
    if invalid:
        return invalid
    record = guide_to_record(touched)
    taken = _slug_taken(repository, record, own_id=guide.id)
    if taken:
        return taken

    updated_id = str(guide.id)
    try:
        repository.apply_changes(guide, record)
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "updating guide", guide_id=updated_id
        )

    _invalidate(updated_id)
    return {"success": True, "guideId": updated_id}


def delete_guide_action(
    session: Session,
    user_sub: Optional[str],
    guide_id: Any,
) -> dict[str, Any]:
    """Hard-delete a guide."""
    denied = guard(session, user_sub)
    if denied:
        return denied
    repository = GuideRepository(session)
    guide = _load(repository, guide_id)
    if guide is None:
        return not_found("Guide", guide_id)

    deleted_id = str(guide.id)
    try:
        repository.delete(guide)
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "deleting guide", guide_id=deleted_id
        )

    logger.info(f"Deleted guide {deleted_id}", extra={"guide_id": deleted_id})
    _invalidate(deleted_id)
    return {"success": True, "guideId": deleted_id}


def get_guide_view(
    session: Session,
    user_sub: Optional[str],
    guide_id: Any,
) -> dict[str, Any]:
    denied = guard(session, user_sub)
    if denied:
        return denied
    guide = _load(GuideRepository(session), guide_id)
    if guide is None:
        return not_found("Guide", guide_id)
    return {"success": True, "data": guide_to_view_model(guide)}


def list_guides(
    session: Session,
    user_sub: Optional[str],
    page: int = 1,
    page_size: int = 10,
    search: Optional[str] = None,
) -> dict[str, Any]:
    """One page of guide view models, most recently updated first."""
    denied = guard(session, user_sub) or check_pagination(page, page_size)
    if denied:
        return denied
    rows, total = GuideRepository(session).get_page(page, page_size, search)
    return {
        "success": True,
        "data": [guide_to_view_model(row) for row in rows],
        "meta": page_meta(total, page, page_size),
    }
