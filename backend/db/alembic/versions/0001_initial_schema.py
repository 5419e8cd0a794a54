"""Initial schema for events, partners, services, and profiles."""

from __future__ import annotations

from typing import Sequence
from typing import Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        primary_key=True,
        server_default=sa.text("gen_random_uuid()"),
    )


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    ]


def _text(name: str, nullable: bool = True) -> sa.Column:
    return sa.Column(name, sa.Text(), nullable=nullable)


def _jsonb(name: str) -> sa.Column:
    return sa.Column(name, postgresql.JSONB(), nullable=True)


def _flag(name: str) -> sa.Column:
    return sa.Column(
        name, sa.Boolean(), nullable=False, server_default=sa.text("false")
    )


def upgrade() -> None:
    """Create initial tables and indexes."""
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    op.create_table(
        "events",
        _uuid_pk(),
        _text("title", nullable=False),
        _text("category", nullable=False),
        _text("image"),
        _text("time"),
        sa.Column("day", sa.Integer(), nullable=True),
        _text("location"),
        _text("price"),
        _text("description"),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        _text("organizer_name"),
        _text("organizer_contact_email"),
        _text("organizer_contact_phone"),
        _text("organizer_website"),
        _text("recurrence_pattern"),
        _text("recurrence_custom_pattern"),
        _text("recurrence_end_date"),
        _text("duration"),
        _jsonb("tags"),
        sa.Column("capacity", sa.Integer(), nullable=True),
        _jsonb("facilities"),
        _jsonb("tickets"),
        _flag("is_sponsored"),
        _text("sponsor_end_date"),
        sa.Column("attendee_count", sa.Integer(), nullable=True),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("reviews", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("day BETWEEN 0 AND 6", name="events_day_range"),
    )
    op.create_index("events_time_idx", "events", ["time"])

    op.create_table(
        "partners",
        _uuid_pk(),
        _text("name", nullable=False),
        _text("section", nullable=False),
        _text("main_category", nullable=False),
        _text("subcategory"),
        _text("main_image"),
        _jsonb("gallery"),
        _text("short_description"),
        _text("long_description"),
        _text("address"),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        _text("area"),
        _text("phone"),
        _text("email"),
        _text("website"),
        _text("line_id"),
        _jsonb("social"),
        _text("regular_hours"),
        _text("seasonal_changes"),
        _flag("open_24h"),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("review_count", sa.Integer(), nullable=True),
        _jsonb("tags"),
        _text("price_range"),
        _text("currency"),
        _jsonb("features"),
        _jsonb("languages"),
        _flag("is_sponsored"),
        _flag("is_featured"),
        _text("sponsor_end_date"),
        _jsonb("accessibility"),
        _jsonb("payment_options"),
        _jsonb("attributes"),
        *_timestamps(),
        sa.CheckConstraint(
            "section IN ('establishment', 'service')",
            name="partners_section_check",
        ),
    )
    op.create_index(
        "partners_section_category_idx", "partners", ["section", "main_category"]
    )

    op.create_table(
        "base_items",
        _uuid_pk(),
        _text("type", nullable=False),
        _text("name", nullable=False),
        _text("short_description"),
        _text("long_description"),
        _text("main_image"),
        _jsonb("gallery_images"),
        _text("address"),
        _jsonb("coordinates"),
        _text("area"),
        _jsonb("contact_info"),
        _text("hours"),
        _flag("open_24h"),
        sa.Column("rating", sa.Float(), nullable=True),
        _jsonb("tags"),
        _text("price_range"),
        _text("currency"),
        _jsonb("features"),
        _jsonb("languages"),
        _flag("is_sponsored"),
        _flag("is_featured"),
        _jsonb("payment_methods"),
        _jsonb("accessibility"),
        *_timestamps(),
    )
    op.create_index("ix_base_items_type", "base_items", ["type"])

    op.create_table(
        "services",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("base_items.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        _text("category", nullable=False),
        _text("subcategory"),
        _jsonb("service_data"),
    )
    op.create_index("ix_services_category", "services", ["category"])

    op.create_table(
        "profiles",
        sa.Column("id", sa.Text(), primary_key=True),
        _text("name"),
        _text("username"),
        _text("email"),
        _flag("is_admin"),
        _text("bio"),
        _text("location"),
        _text("avatar_url"),
        _jsonb("interests"),
        _jsonb("favorite_places"),
        _jsonb("preferences"),
        _jsonb("social_links"),
        _jsonb("privacy_settings"),
        _jsonb("notifications"),
        _jsonb("payment_methods"),
        sa.Column("events_attended", sa.Integer(), nullable=True),
        _text("join_date"),
        *_timestamps(),
    )
    op.create_index(
        "profiles_username_key",
        "profiles",
        ["username"],
        unique=True,
        postgresql_where=sa.text("username IS NOT NULL"),
    )


def downgrade() -> None:
    """Drop initial tables."""
    op.drop_index("profiles_username_key", table_name="profiles")
    op.drop_table("profiles")
    op.drop_index("ix_services_category", table_name="services")
    op.drop_table("services")
    op.drop_index("ix_base_items_type", table_name="base_items")
    op.drop_table("base_items")
    op.drop_index("partners_section_category_idx", table_name="partners")
    op.drop_table("partners")
    op.drop_index("events_time_idx", table_name="events")
    op.drop_table("events")
