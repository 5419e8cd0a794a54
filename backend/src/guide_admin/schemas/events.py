"""Form schema for events."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import Field, ValidationInfo, field_validator

from guide_admin.db.models.enums import RecurrencePattern
from guide_admin.schemas.common import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    CoordinatesForm,
    FormModel,
    OptionalEmail,
    OptionalPhone,
    OptionalUrl,
    Url,
)


class OrganizerForm(FormModel):
    name: str = Field(min_length=2, max_length=MAX_NAME_LENGTH)
    contactEmail: OptionalEmail = ""
    contactPhone: OptionalPhone = ""
    website: OptionalUrl = ""


class RecurrenceForm(FormModel):
    pattern: RecurrencePattern = RecurrencePattern.NONE
    customPattern: str = Field(default="", validate_default=True)
    endDate: str = ""

    @field_validator("customPattern")
    @classmethod
    def _custom_pattern_required(cls, value: str, info: ValidationInfo) -> str:
        if info.data.get("pattern") == RecurrencePattern.CUSTOM and not value.strip():
            raise ValueError("is required when the recurrence pattern is custom")
        return value


class FacilitiesForm(FormModel):
    parking: bool = False
    atm: bool = False
    foodAvailable: bool = False
    toilets: bool = False
    wheelchair: bool = False
    wifi: bool = False
    petFriendly: bool = False
    childFriendly: bool = False


def _number_as_text(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return "" if value is None else value


class TicketTypeForm(FormModel):
    """Ticket prices are free text ("Free", "12.50")."""

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    price: str = Field(default="", max_length=50)
    description: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_text(cls, value: Any) -> Any:
        return _number_as_text(value)


class TicketsForm(FormModel):
    url: OptionalUrl = ""
    availableCount: int = Field(default=0, ge=0)
    types: Optional[list[TicketTypeForm]] = None


class EventForm(FormModel):
    """Validation rules for the event create/edit form."""

    related_fields: ClassVar[dict[str, tuple[str, ...]]] = {
        "isSponsored": ("sponsorEndDate",)
    }

    title: str = Field(min_length=3, max_length=MAX_NAME_LENGTH)
    category: str = Field(min_length=1)
    image: Url
    time: str = Field(min_length=1)
    location: str = Field(min_length=3, max_length=500)
    price: str = ""
    description: str = Field(min_length=10, max_length=MAX_DESCRIPTION_LENGTH)
    coordinates: CoordinatesForm = Field(default_factory=CoordinatesForm)
    organizer: OrganizerForm
    recurrence: Optional[RecurrenceForm] = None
    duration: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    capacity: int = Field(default=0, ge=0)
    facilities: FacilitiesForm = Field(default_factory=FacilitiesForm)
    tickets: TicketsForm = Field(default_factory=TicketsForm)
    isSponsored: bool = False
    sponsorEndDate: str = Field(default="", validate_default=True)

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_text(cls, value: Any) -> Any:
        return _number_as_text(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [tag.strip() for tag in value.split(",") if tag.strip()]
        return [] if value is None else value

    @field_validator("sponsorEndDate")
    @classmethod
    def _end_date_required(cls, value: str, info: ValidationInfo) -> str:
        if info.data.get("isSponsored") and not value.strip():
            raise ValueError("is required when the event is sponsored")
        return value
