"""Base item models.

Services and activities are stored as a generic base item row plus a
details row that shares its primary key. ``BaseItem.type`` says which
details table holds the rest.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, Float, ForeignKey, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import TIMESTAMP

from guide_admin.db.base import Base
from guide_admin.db.models.types import JsonColumn


class BaseItem(Base):
    """Listing fields shared by every item type."""

    __tablename__ = "base_items"

    id: Mapped[UUID] = mapped_column(Uuid(), primary_key=True, default=uuid4)
    type: Mapped[str] = mapped_column(Text(), nullable=False, index=True)
    name: Mapped[str] = mapped_column(Text(), nullable=False)
    short_description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    long_description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    main_image: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    gallery_images: Mapped[Optional[List[str]]] = mapped_column(
        JsonColumn, nullable=True
    )
    address: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    coordinates: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    area: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    contact_info: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    hours: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    open_24h: Mapped[bool] = mapped_column(Boolean(), nullable=False, default=False)
    rating: Mapped[Optional[float]] = mapped_column(Float(), nullable=True)
    tags: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    price_range: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    currency: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    features: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    languages: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    is_sponsored: Mapped[bool] = mapped_column(
        Boolean(), nullable=False, default=False
    )
    is_featured: Mapped[bool] = mapped_column(Boolean(), nullable=False, default=False)
    payment_methods: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    accessibility: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
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

    service: Mapped[Optional["Service"]] = relationship(
        back_populates="base_item",
        cascade="all, delete-orphan",
        uselist=False,
    )
    activity: Mapped[Optional["Activity"]] = relationship(
        back_populates="base_item",
        cascade="all, delete-orphan",
        uselist=False,
    )


class Service(Base):
    """Service details attached to a base item."""

    __tablename__ = "services"

    id: Mapped[UUID] = mapped_column(
        Uuid(),
        ForeignKey("base_items.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category: Mapped[str] = mapped_column(Text(), nullable=False, index=True)
    subcategory: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    service_data: Mapped[Optional[Any]] = mapped_column(
        JsonColumn,
        nullable=True,
        comment="Category-specific service fields",
    )

    base_item: Mapped[BaseItem] = relationship(back_populates="service")


class Activity(Base):
    """Activity details attached to a base item."""

    __tablename__ = "activities"

    id: Mapped[UUID] = mapped_column(
        Uuid(),
        ForeignKey("base_items.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category: Mapped[str] = mapped_column(Text(), nullable=False, index=True)
    subcategory: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    activity_data: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)

    base_item: Mapped[BaseItem] = relationship(back_populates="activity")
