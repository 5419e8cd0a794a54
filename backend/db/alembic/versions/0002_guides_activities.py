"""Add guides and activity details."""

from __future__ import annotations

from typing import Sequence
from typing import Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "0002_guides_activities"
down_revision: Union[str, None] = "0001_initial_schema"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _text(name: str, nullable: bool = True) -> sa.Column:
    return sa.Column(name, sa.Text(), nullable=nullable)


def _jsonb(name: str) -> sa.Column:
    return sa.Column(name, postgresql.JSONB(), nullable=True)


def upgrade() -> None:
    """Create the guides and activities tables."""
    op.create_table(
        "activities",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("base_items.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        _text("category", nullable=False),
        _text("subcategory"),
        _jsonb("activity_data"),
    )
    op.create_index("ix_activities_category", "activities", ["category"])

    op.create_table(
        "guides",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        _text("title", nullable=False),
        _text("category", nullable=False),
        _text("slug"),
        _text("main_image"),
        _text("short_description"),
        _text("long_description"),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("reviews", sa.Integer(), nullable=True),
        sa.Column(
            "is_featured",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        _jsonb("tags"),
        _text("location"),
        _jsonb("coordinates"),
        _jsonb("gallery_images"),
        _jsonb("sections"),
        _jsonb("items"),
        _jsonb("contacts"),
        _text("difficulty"),
        _text("duration"),
        _jsonb("equipment"),
        _jsonb("facilities"),
        _jsonb("practical_info"),
        _jsonb("recommendations"),
        _jsonb("testimonials"),
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
        sa.UniqueConstraint("slug", name="guides_slug_key"),
    )
    op.create_index("ix_guides_category", "guides", ["category"])


def downgrade() -> None:
    """Drop the guides and activities tables."""
    op.drop_index("ix_guides_category", table_name="guides")
    op.drop_table("guides")
    op.drop_index("ix_activities_category", table_name="activities")
    op.drop_table("activities")
