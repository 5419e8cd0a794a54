"""Admin actions for events."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from guide_admin.actions.base import (
    check_pagination,
    guard,
    not_found,
    page_meta,
    parse_entity_id,
    patch_view,
    persistence_failure,
    validation_failure,
)
from guide_admin.db.repositories import EventRepository
from guide_admin.mappers import event_to_record, event_to_view_model
from guide_admin.schemas import EventForm, SponsorshipForm
from guide_admin.services.cache import invalidate_many, item_tag, list_tag
from guide_admin.utils.logging import get_logger

logger = get_logger(__name__)

ENTITY = "event"


def _invalidate(event_id: str) -> None:
    invalidate_many(list_tag(ENTITY), item_tag(ENTITY, event_id))


def create_event_action(
    session: Session,
    user_sub: Optional[str],
    data: Mapping[str, Any],
) -> dict[str, Any]:
    """Validate and insert a new event."""
    denied = guard(session, user_sub)
    if denied:
        return denied
    invalid = validation_failure(EventForm, data)
    if invalid:
        return invalid

    try:
        event = EventRepository(session).create_from_record(event_to_record(data))
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "creating event", title=data.get("title")
        )

    event_id = str(event.id)
    logger.info(f"Created event {event_id}", extra={"event_id": event_id})
    _invalidate(event_id)
    return {"success": True, "eventId": event_id}


def update_event_action(
    session: Session,
    user_sub: Optional[str],
    event_id: Any,
    data: Mapping[str, Any],
) -> dict[str, Any]:
    """Apply a partial view model to an existing event.

    The patch is merged over the current view model and checked there.
    Only problems under the patched keys are reported, and only those
    keys are written.
    """
    denied = guard(session, user_sub)
    if denied:
        return denied
    parsed_id = parse_entity_id(event_id)
    repository = EventRepository(session)
    event = repository.get_by_id(parsed_id) if parsed_id else None
    if event is None:
        return not_found("Event", event_id)

    merged, touched = patch_view(event_to_view_model(event), data)
    invalid = validation_failure(EventForm, merged, touched)
    if invalid:
        return invalid

    try:
        repository.apply_changes(event, event_to_record(touched))
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "updating event", event_id=str(parsed_id)
        )

    _invalidate(str(parsed_id))
    return {"success": True, "eventId": str(parsed_id)}


def update_event_sponsorship(
    session: Session,
    user_sub: Optional[str],
    event_id: Any,
    is_sponsored: bool,
    end_date: Optional[str] = None,
) -> dict[str, Any]:
    """Toggle sponsorship; the end date is cleared when unsponsoring."""
    denied = guard(session, user_sub)
    if denied:
        return denied
    sponsorship = {"isSponsored": is_sponsored, "endDate": end_date}
    invalid = validation_failure(SponsorshipForm, sponsorship)
    if invalid:
        return invalid
    form = SponsorshipForm.model_validate(sponsorship)
    parsed_id = parse_entity_id(event_id)
    repository = EventRepository(session)
    event = repository.get_by_id(parsed_id) if parsed_id else None
    if event is None:
        return not_found("Event", event_id)

    try:
        repository.apply_changes(
            event,
            {
                "is_sponsored": form.isSponsored,
                "sponsor_end_date": form.endDate if form.isSponsored else None,
            },
        )
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "updating event sponsorship", event_id=str(parsed_id)
        )

    _invalidate(str(parsed_id))
    return {"success": True, "eventId": str(parsed_id)}


def get_event_view(
    session: Session,
    user_sub: Optional[str],
    event_id: Any,
) -> dict[str, Any]:
    denied = guard(session, user_sub)
    if denied:
        return denied
    parsed_id = parse_entity_id(event_id)
    event = EventRepository(session).get_by_id(parsed_id) if parsed_id else None
    if event is None:
        return not_found("Event", event_id)
    return {"success": True, "data": event_to_view_model(event)}


def list_events(
    session: Session,
    user_sub: Optional[str],
    page: int = 1,
    page_size: int = 10,
    search: Optional[str] = None,
) -> dict[str, Any]:
    """One page of event view models, newest time first."""
    denied = guard(session, user_sub) or check_pagination(page, page_size)
    if denied:
        return denied
    rows, total = EventRepository(session).get_page(page, page_size, search)
    return {
        "success": True,
        "data": [event_to_view_model(row) for row in rows],
        "meta": page_meta(total, page, page_size),
    }
