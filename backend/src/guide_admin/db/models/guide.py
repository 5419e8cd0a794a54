"""Guide model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, Float, Integer, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TIMESTAMP

from guide_admin.db.base import Base
from guide_admin.db.models.types import JsonColumn


class Guide(Base):
    """An editorial guide, e.g. visas or local transport."""

    __tablename__ = "guides"

    id: Mapped[UUID] = mapped_column(Uuid(), primary_key=True, default=uuid4)
    title: Mapped[str] = mapped_column(Text(), nullable=False)
    category: Mapped[str] = mapped_column(Text(), nullable=False, index=True)
    slug: Mapped[Optional[str]] = mapped_column(Text(), nullable=True, unique=True)
    main_image: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    short_description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    long_description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    rating: Mapped[Optional[float]] = mapped_column(Float(), nullable=True)
    reviews: Mapped[Optional[int]] = mapped_column(Integer(), nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean(), nullable=False, default=False)
    tags: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    coordinates: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    gallery_images: Mapped[Optional[List[str]]] = mapped_column(
        JsonColumn, nullable=True
    )
    sections: Mapped[Optional[Any]] = mapped_column(
        JsonColumn,
        nullable=True,
        comment="Ordered content sections: title, content, order, iconName",
    )
    items: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    contacts: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    difficulty: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    duration: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    equipment: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    facilities: Mapped[Optional[List[str]]] = mapped_column(JsonColumn, nullable=True)
    practical_info: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    recommendations: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
    testimonials: Mapped[Optional[Any]] = mapped_column(JsonColumn, nullable=True)
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
