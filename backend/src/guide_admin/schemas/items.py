"""Form fields shared by base item kinds (services, activities)."""

from __future__ import annotations

from pydantic import Field, field_validator

from guide_admin.db.models.enums import PriceRange
from guide_admin.schemas.common import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    CoordinatesForm,
    FormModel,
    OptionalCurrency,
    OptionalEmail,
    OptionalPhone,
    OptionalUrl,
    Rating,
)


class ContactInfoForm(FormModel):
    phone: OptionalPhone = ""
    email: OptionalEmail = ""
    website: OptionalUrl = ""
    lineId: str = ""
    facebook: str = ""
    instagram: str = ""


class BaseItemForm(FormModel):
    """Validation rules common to every base item form."""

    name: str = Field(min_length=2, max_length=MAX_NAME_LENGTH)
    category: str = Field(min_length=1)
    subcategory: str = ""
    mainImage: OptionalUrl = ""
    shortDescription: str = Field(min_length=10, max_length=500)
    longDescription: str = Field(default="", max_length=MAX_DESCRIPTION_LENGTH)
    address: str = ""
    area: str = ""
    coordinates: CoordinatesForm = Field(default_factory=CoordinatesForm)
    contactInfo: ContactInfoForm = Field(default_factory=ContactInfoForm)
    hours: str = ""
    open24h: bool = False
    rating: Rating = 0
    priceRange: str = ""
    currency: OptionalCurrency = ""
    isSponsored: bool = False
    isFeatured: bool = False

    @field_validator("priceRange")
    @classmethod
    def _known_price_range(cls, value: str) -> str:
        allowed = {price.value for price in PriceRange}
        if value and value not in allowed:
            raise ValueError(f"must be one of {', '.join(sorted(allowed))}")
        return value
