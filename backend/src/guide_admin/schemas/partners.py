"""Form schema for partners."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, ValidationInfo, field_validator

from guide_admin.db.models.enums import (
    EstablishmentCategory,
    PartnerSection,
    PriceRange,
    ServiceCategory,
)
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
    check_url,
)

MAIN_CATEGORIES = frozenset(
    [category.value for category in EstablishmentCategory]
    + [category.value for category in ServiceCategory]
)


class ImagesForm(FormModel):
    main: OptionalUrl = ""
    gallery: list[str] = Field(default_factory=list, max_length=20)

    @field_validator("gallery")
    @classmethod
    def _gallery_urls(cls, value: list[str]) -> list[str]:
        return [check_url(url) for url in value if url and url.strip()]


class DescriptionForm(FormModel):
    short: str = Field(min_length=10, max_length=500)
    long: str = Field(default="", max_length=MAX_DESCRIPTION_LENGTH)


class LocationForm(FormModel):
    address: str = Field(min_length=3, max_length=500)
    coordinates: CoordinatesForm = Field(default_factory=CoordinatesForm)
    area: str = ""


class SocialForm(FormModel):
    facebook: str = ""
    instagram: str = ""
    twitter: str = ""


class ContactForm(FormModel):
    phone: OptionalPhone = ""
    email: OptionalEmail = ""
    website: OptionalUrl = ""
    lineId: str = Field(default="", max_length=64)
    social: SocialForm = Field(default_factory=SocialForm)


class HoursForm(FormModel):
    regularHours: str = ""
    seasonalChanges: str = ""
    open24h: bool = False


class RatingForm(FormModel):
    score: Rating = 0
    reviewCount: int = Field(default=0, ge=0)


class PricesForm(FormModel):
    priceRange: PriceRange
    currency: OptionalCurrency = ""


class PromotionForm(FormModel):
    isSponsored: bool = False
    isFeatured: bool = False
    promotionEndsAt: str = Field(default="", validate_default=True)

    @field_validator("promotionEndsAt")
    @classmethod
    def _end_date_required(cls, value: str, info: ValidationInfo) -> str:
        if info.data.get("isSponsored") and not value.strip():
            raise ValueError("is required when the partner is sponsored")
        return value


class AccessibilityForm(FormModel):
    wheelchairAccessible: bool = False
    familyFriendly: bool = False
    petFriendly: bool = False


class PaymentOptionsForm(FormModel):
    cash: bool = False
    creditCard: bool = False
    mobilePay: bool = False
    cryptoCurrency: bool = False
    acceptedCards: list[str] = Field(default_factory=list)


class AttributeInputsForm(FormModel):
    """Flat category-specific inputs; keys unused by a category are ignored."""

    hasPool: bool = False
    hasFreeWifi: bool = False
    hasBreakfast: bool = False
    hasAirCon: bool = False
    roomCount: Optional[int] = Field(default=None, ge=0)
    cuisine: str = Field(default="", max_length=MAX_NAME_LENGTH)
    hasVeganOptions: bool = False
    alcoholServed: bool = False
    vehicleTypes: list[str] = Field(default_factory=list)
    requiresLicense: bool = False
    specialties: list[str] = Field(default_factory=list)
    acceptsInsurance: bool = False

    @field_validator("roomCount", mode="before")
    @classmethod
    def _blank_room_count(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("vehicleTypes", "specialties", mode="before")
    @classmethod
    def _split_lists(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return [] if value is None else value


class PartnerForm(FormModel):
    """Validation rules for the partner create/edit form.

    Main category must be a known category, but its consistency with the
    section is not checked.
    """

    name: str = Field(min_length=2, max_length=MAX_NAME_LENGTH)
    section: PartnerSection
    mainCategory: str
    subcategory: str = ""
    images: ImagesForm = Field(default_factory=ImagesForm)
    description: DescriptionForm
    location: LocationForm
    contact: ContactForm = Field(default_factory=ContactForm)
    hours: HoursForm = Field(default_factory=HoursForm)
    rating: RatingForm = Field(default_factory=RatingForm)
    tags: list[str] = Field(default_factory=list)
    prices: PricesForm
    features: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    promotion: PromotionForm = Field(default_factory=PromotionForm)
    accessibility: AccessibilityForm = Field(default_factory=AccessibilityForm)
    paymentOptions: PaymentOptionsForm = Field(default_factory=PaymentOptionsForm)
    attributes: Optional[dict[str, Any]] = None
    attributeInputs: Optional[AttributeInputsForm] = None

    @field_validator("mainCategory")
    @classmethod
    def _known_category(cls, value: str) -> str:
        if value not in MAIN_CATEGORIES:
            raise ValueError(f"must be one of {', '.join(sorted(MAIN_CATEGORIES))}")
        return value
