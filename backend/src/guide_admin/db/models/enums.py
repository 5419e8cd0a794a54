"""Enum definitions for database models."""

from __future__ import annotations

import enum


class RecurrencePattern(str, enum.Enum):
    """Recurrence patterns for events."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class PartnerSection(str, enum.Enum):
    """Top-level partner sections."""

    ESTABLISHMENT = "establishment"
    SERVICE = "service"


class EstablishmentCategory(str, enum.Enum):
    """Main categories for establishment partners."""

    ACCOMMODATION = "accommodation"
    FOOD_DRINK = "food_drink"
    LEISURE = "leisure"
    SHOPPING = "shopping"
    CULTURE = "culture"
    TRANSPORT_PROVIDER = "transport_provider"


class ServiceCategory(str, enum.Enum):
    """Main categories for service partners and standalone services."""

    ACCOMMODATION = "accommodation"
    MOBILITY = "mobility"
    HEALTH = "health"
    WELLNESS = "wellness"
    MAINTENANCE = "maintenance"
    REAL_ESTATE = "real_estate"
    PROFESSIONAL = "professional"
    VEHICLE_REPAIR = "vehicle_repair"


class PriceRange(str, enum.Enum):
    """Price indicators shown on partner listings."""

    BUDGET = "€"
    MODERATE = "€€"
    EXPENSIVE = "€€€"
    LUXURY = "€€€€"
    FREE = "Free"
    VARIES = "Varies"


class ProfileVisibility(str, enum.Enum):
    """Who can see a user profile."""

    PUBLIC = "public"
    FRIENDS = "friends"
    PRIVATE = "private"
