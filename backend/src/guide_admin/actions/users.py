"""Admin actions for user profiles."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from guide_admin.actions.base import (
    check_pagination,
    failure,
    guard,
    not_found,
    page_meta,
    patch_view,
    persistence_failure,
    validation_failure,
)
from guide_admin.db.repositories import ProfileRepository
from guide_admin.mappers import profile_to_record, profile_to_view_model
from guide_admin.schemas import ProfileForm
from guide_admin.services.cache import invalidate_many, list_tag
from guide_admin.utils.logging import get_logger, mask_pii

logger = get_logger(__name__)


def _profile_tag(user_id: str) -> str:
    return f"user_profile_{user_id}"


def _admin_tag(user_id: str) -> str:
    return f"user_admin_{user_id}"


def update_user_profile_action(
    session: Session,
    user_sub: Optional[str],
    user_id: str,
    data: Mapping[str, Any],
) -> dict[str, Any]:
    """Apply a partial profile view model. Admin status is never touched."""
    denied = guard(session, user_sub)
    if denied:
        return denied
    repository = ProfileRepository(session)
    profile = repository.get_by_id(str(user_id)) if user_id else None
    if profile is None:
        return not_found("User", user_id)

    merged, touched = patch_view(profile_to_view_model(profile), data)
    invalid = validation_failure(ProfileForm, merged, touched)
    if invalid:
        return invalid

    try:
        repository.apply_changes(profile, profile_to_record(touched))
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "updating user profile", user_id=mask_pii(user_id)
        )

    invalidate_many(list_tag("user"), _profile_tag(profile.id))
    return {"success": True, "userId": profile.id}


def toggle_user_admin_status(
    session: Session,
    user_sub: Optional[str],
    user_id: str,
    is_admin: Any,
) -> dict[str, Any]:
    """Grant or revoke admin status for a user."""
    denied = guard(session, user_sub)
    if denied:
        return denied
    if not isinstance(is_admin, bool):
        return failure(
            "Validation failed",
            status=400,
            violations=[{"field": "isAdmin", "message": "must be a boolean"}],
        )
    repository = ProfileRepository(session)
    profile = repository.get_by_id(str(user_id)) if user_id else None
    if profile is None:
        return not_found("User", user_id)

    try:
        repository.apply_changes(profile, {"is_admin": is_admin})
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "updating admin status", user_id=mask_pii(user_id)
        )

    logger.info(
        f"Admin status set to {is_admin}",
        extra={"user_id": mask_pii(profile.id), "actor": mask_pii(user_sub)},
    )
    invalidate_many(
        _profile_tag(profile.id), _admin_tag(profile.id), list_tag("user")
    )
    return {"success": True, "userId": profile.id, "isAdmin": is_admin}


def get_user_view(
    session: Session,
    user_sub: Optional[str],
    user_id: str,
) -> dict[str, Any]:
    denied = guard(session, user_sub)
    if denied:
        return denied
    profile = ProfileRepository(session).get_by_id(str(user_id)) if user_id else None
    if profile is None:
        return not_found("User", user_id)
    return {"success": True, "data": profile_to_view_model(profile)}


def list_users(
    session: Session,
    user_sub: Optional[str],
    page: int = 1,
    page_size: int = 10,
    search: Optional[str] = None,
) -> dict[str, Any]:
    denied = guard(session, user_sub) or check_pagination(page, page_size)
    if denied:
        return denied
    rows, total = ProfileRepository(session).get_page(page, page_size, search)
    return {
        "success": True,
        "data": [profile_to_view_model(row) for row in rows],
        "meta": page_meta(total, page, page_size),
    }
