"""Admin actions for partners."""

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
from guide_admin.db.models import Partner
from guide_admin.db.repositories import PartnerRepository
from guide_admin.mappers import (
    expand_partner_attributes,
    partner_to_record,
    partner_to_view_model,
)
from guide_admin.schemas import PartnerForm, SponsorshipForm
from guide_admin.services.cache import invalidate_many, item_tag, list_tag
from guide_admin.utils.logging import get_logger

logger = get_logger(__name__)

ENTITY = "partner"


def _invalidate(partner_id: str) -> None:
    invalidate_many(list_tag(ENTITY), item_tag(ENTITY, partner_id))


def _load(repository: PartnerRepository, partner_id: Any) -> Optional[Partner]:
    parsed_id = parse_entity_id(partner_id)
    return repository.get_by_id(parsed_id) if parsed_id else None


def partner_view(partner: Partner) -> dict[str, Any]:
    """Partner view model plus flat ``attributeInputs`` for edit forms."""
    view = partner_to_view_model(partner)
    view["attributeInputs"] = expand_partner_attributes(
        view["section"], view["mainCategory"], view["attributes"]
    )
    return view


def create_partner_action(
    session: Session,
    user_sub: Optional[str],
    data: Mapping[str, Any],
) -> dict[str, Any]:
    """Validate and insert a new partner."""
    denied = guard(session, user_sub)
    if denied:
        return denied
    invalid = validation_failure(PartnerForm, data)
    if invalid:
        return invalid

    try:
        partner = PartnerRepository(session).create_from_record(
            partner_to_record(data)
        )
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "creating partner", name=data.get("name")
        )

    partner_id = str(partner.id)
    logger.info(f"Created partner {partner_id}", extra={"partner_id": partner_id})
    _invalidate(partner_id)
    return {"success": True, "partnerId": partner_id}


def update_partner_action(
    session: Session,
    user_sub: Optional[str],
    partner_id: Any,
    data: Mapping[str, Any],
) -> dict[str, Any]:
    """Apply a partial view model to an existing partner."""
    denied = guard(session, user_sub)
    if denied:
        return denied
    repository = PartnerRepository(session)
    partner = _load(repository, partner_id)
    if partner is None:
        return not_found("Partner", partner_id)

    merged, touched = patch_view(partner_view(partner), data)
    invalid = validation_failure(PartnerForm, merged, touched)
    if invalid:
        return invalid
    if "attributeInputs" in touched:
        # Attributes are shaped for the partner's resulting category.
        touched["section"] = merged["section"]
        touched["mainCategory"] = merged["mainCategory"]

    try:
        repository.apply_changes(partner, partner_to_record(touched))
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "updating partner", partner_id=str(partner.id)
        )

    _invalidate(str(partner.id))
    return {"success": True, "partnerId": str(partner.id)}


def delete_partner_action(
    session: Session,
    user_sub: Optional[str],
    partner_id: Any,
) -> dict[str, Any]:
    """Hard-delete a partner."""
    denied = guard(session, user_sub)
    if denied:
        return denied
    repository = PartnerRepository(session)
    partner = _load(repository, partner_id)
    if partner is None:
        return not_found("Partner", partner_id)

    deleted_id = str(partner.id)
    try:
        repository.delete(partner)
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "deleting partner", partner_id=deleted_id
        )

    logger.info(f"Deleted partner {deleted_id}", extra={"partner_id": deleted_id})
    _invalidate(deleted_id)
    return {"success": True, "partnerId": deleted_id}


def update_partner_sponsorship(
    session: Session,
    user_sub: Optional[str],
    partner_id: Any,
    is_sponsored: bool,
    end_date: Optional[str] = None,
) -> dict[str, Any]:
    denied = guard(session, user_sub)
    if denied:
        return denied
    sponsorship = {"isSponsored": is_sponsored, "endDate": end_date}
    invalid = validation_failure(SponsorshipForm, sponsorship)
    if invalid:
        return invalid
    form = SponsorshipForm.model_validate(sponsorship)
    repository = PartnerRepository(session)
    partner = _load(repository, partner_id)
    if partner is None:
        return not_found("Partner", partner_id)

    try:
        repository.apply_changes(
            partner,
            {
                "is_sponsored": form.isSponsored,
                "sponsor_end_date": form.endDate if form.isSponsored else None,
            },
        )
        session.commit()
    except Exception as exc:
        return persistence_failure(
            session, exc, "updating partner sponsorship", partner_id=str(partner.id)
        )

    _invalidate(str(partner.id))
    return {"success": True, "partnerId": str(partner.id)}


def get_partner_view(
    session: Session,
    user_sub: Optional[str],
    partner_id: Any,
) -> dict[str, Any]:
    denied = guard(session, user_sub)
    if denied:
        return denied
    partner = _load(PartnerRepository(session), partner_id)
    if partner is None:
        return not_found("Partner", partner_id)
    return {"success": True, "data": partner_view(partner)}


def list_partners(
    session: Session,
    user_sub: Optional[str],
    page: int = 1,
    page_size: int = 10,
    search: Optional[str] = None,
) -> dict[str, Any]:
    denied = guard(session, user_sub) or check_pagination(page, page_size)
    if denied:
        return denied
    rows, total = PartnerRepository(session).get_page(page, page_size, search)
    return {
        "success": True,
        "data": [partner_to_view_model(row) for row in rows],
        "meta": page_meta(total, page, page_size),
    }
