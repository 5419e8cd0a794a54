"""Partner model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, Float, Integer, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TIMESTAMP

from guide_admin.db.base import Base
from guide_admin.db.models.types import JsonColumn


class Partner(Base):
    """A business or service provider listed in the guide."""

    __tablename__ = "partners"

    id: Mapped[UUID] = mapped_column(Uuid(), primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(Text(), nullable=False)
    section: Mapped[str] = mapped_column(Text(), nullable=False)
    main_category: Mapped[str] = mapped_column(Text(), nullable=False)
    subcategory: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    main_image: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    gallery: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    short_description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    long_description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    latitude: Mapped[Optional[float]] = mapped_column(Float(), nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Float(), nullable=True)
    area: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    line_id: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    social: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    regular_hours: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    seasonal_changes: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    open_24h: Mapped[bool] = mapped_column(Boolean(), nullable=False, default=False)
    rating: Mapped[Optional[float]] = mapped_column(Float(), nullable=True)
    review_count: Mapped[Optional[int]] = mapped_column(Integer(), nullable=True)
    tags: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    price_range: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    currency: Mapped[Optional[str]] = mapped_column(
        Text(),
        nullable=True,
        comment="ISO 4217 currency code",
    )
    features: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    languages: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    is_sponsored: Mapped[bool] = mapped_column(
        Boolean(), nullable=False, default=False
    )
    is_featured: Mapped[bool] = mapped_column(Boolean(), nullable=False, default=False)
    sponsor_end_date: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    accessibility: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    payment_options: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    attributes: Mapped[Optional[Any]] = mapped_column(
        JsonColumn,
        nullable=True,
        comment="Category-specific attributes keyed by section and main category",
    )
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
