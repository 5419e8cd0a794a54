"""Form schema for guides."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, field_validator

from guide_admin.schemas.common import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    CoordinatesForm,
    FormModel,
    OptionalEmail,
    OptionalPhone,
    OptionalUrl,
    Rating,
    Url,
    check_url,
)


def _comma_list(value: Any) -> Any:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class SectionForm(FormModel):
    title: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    content: str = Field(min_length=1, max_length=MAX_DESCRIPTION_LENGTH)
    order: int = Field(default=1, ge=1)
    iconName: str = ""


class GuideItemForm(FormModel):
    title: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    description: str = Field(default="", max_length=MAX_DESCRIPTION_LENGTH)
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> Any:
        return _comma_list(value)


class GuideContactForm(FormModel):
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    type: str = ""
    email: OptionalEmail = ""
    phone: OptionalPhone = ""
    website: OptionalUrl = ""
    address: str = ""
    description: str = ""


class GuideForm(FormModel):
    """Validation rules for the guide create/edit form."""

    title: str = Field(min_length=3, max_length=MAX_NAME_LENGTH)
    category: str = Field(min_length=1)
    slug: str = Field(default="", max_length=MAX_NAME_LENGTH, pattern=r"^[a-z0-9-]*$")
    mainImage: Url
    shortDescription: str = Field(min_length=10, max_length=500)
    longDescription: str = Field(min_length=20, max_length=MAX_DESCRIPTION_LENGTH)
    rating: Rating = 0
    reviews: int = Field(default=0, ge=0)
    isFeatured: bool = False
    tags: list[str] = Field(default_factory=list)
    location: str = ""
    coordinates: Optional[CoordinatesForm] = None
    galleryImages: list[str] = Field(default_factory=list, max_length=20)
    sections: list[SectionForm] = Field(default_factory=list)
    items: list[GuideItemForm] = Field(default_factory=list)
    contacts: list[GuideContactForm] = Field(default_factory=list)
    difficulty: str = ""
    duration: str = ""
    equipment: list[str] = Field(default_factory=list)
    facilities: list[str] = Field(default_factory=list)
    practicalInfo: dict[str, Any] = Field(default_factory=dict)

    @field_validator("tags", "equipment", "facilities", "galleryImages", mode="before")
    @classmethod
    def _split_lists(cls, value: Any) -> Any:
        return _comma_list(value)

    @field_validator("galleryImages")
    @classmethod
    def _gallery_urls(cls, value: list[str]) -> list[str]:
        return [check_url(url) for url in value if url and url.strip()]
