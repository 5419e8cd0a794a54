"""Event model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, Float, Integer, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TIMESTAMP

from guide_admin.db.base import Base
from guide_admin.db.models.types import JsonColumn


class Event(Base):
    """A dated event listed in the guide."""

    __tablename__ = "events"

    id: Mapped[UUID] = mapped_column(Uuid(), primary_key=True, default=uuid4)
    title: Mapped[str] = mapped_column(Text(), nullable=False)
    category: Mapped[str] = mapped_column(Text(), nullable=False)
    image: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    time: Mapped[Optional[str]] = mapped_column(
        Text(),
        nullable=True,
        comment="ISO-8601 local start time as entered",
    )
    day: Mapped[Optional[int]] = mapped_column(
        Integer(),
        nullable=True,
        comment="Day of week derived from time, Sunday = 0",
    )
    location: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    price: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    latitude: Mapped[Optional[float]] = mapped_column(Float(), nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Float(), nullable=True)
    organizer_name: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    organizer_contact_email: Mapped[Optional[str]] = mapped_column(
        Text(), nullable=True
    )
    organizer_contact_phone: Mapped[Optional[str]] = mapped_column(
        Text(), nullable=True
    )
    organizer_website: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    recurrence_pattern: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    recurrence_custom_pattern: Mapped[Optional[str]] = mapped_column(
        Text(), nullable=True
    )
    recurrence_end_date: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    duration: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    tags: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    capacity: Mapped[Optional[int]] = mapped_column(Integer(), nullable=True)
    facilities: Mapped[Optional[Any]] = mapped_column(
        JsonColumn,
        nullable=True,
        comment="Amenity flags, stored as an object or a JSON string",
    )
    tickets: Mapped[Optional[Any]] = mapped_column(
        JsonColumn,
        nullable=True,
        comment="Ticketing info, stored as an object or a JSON string",
    )
    is_sponsored: Mapped[bool] = mapped_column(
        Boolean(), nullable=False, default=False
    )
    sponsor_end_date: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    attendee_count: Mapped[Optional[int]] = mapped_column(Integer(), nullable=True)
    rating: Mapped[Optional[float]] = mapped_column(Float(), nullable=True)
    reviews: Mapped[Optional[int]] = mapped_column(Integer(), nullable=True)
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
