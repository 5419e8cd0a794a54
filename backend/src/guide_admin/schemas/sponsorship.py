"""Form schema for sponsorship updates."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, ValidationInfo, field_validator

from guide_admin.schemas.common import FormModel
from guide_admin.utils.parsers import parse_datetime


class SponsorshipForm(FormModel):
    """Sponsorship toggle shared by events and partners."""

    isSponsored: bool
    endDate: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("endDate")
    @classmethod
    def _end_date(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if not value or not value.strip():
            if info.data.get("isSponsored"):
                raise ValueError("is required when marking as sponsored")
            return None
        try:
            parse_datetime(value.strip())
        except ValueError as exc:
            raise ValueError("must be an ISO-8601 date") from exc
        return value.strip()
