"""User profile model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import Boolean, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TIMESTAMP

from guide_admin.db.base import Base
from guide_admin.db.models.types import JsonColumn


class Profile(Base):
    """Application profile for an authenticated user."""

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(
        Text(),
        primary_key=True,
        comment="Auth provider subject identifier",
    )
    name: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    username: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    is_admin: Mapped[bool] = mapped_column(Boolean(), nullable=False, default=False)
    bio: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    interests: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    favorite_places: Mapped[Optional[List[str]]] = mapped_column(
        JsonColumn, nullable=True
    )
    preferences: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    social_links: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    privacy_settings: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    notifications: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    payment_methods: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    events_attended: Mapped[Optional[int]] = mapped_column(Integer(), nullable=True)
    join_date: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
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
