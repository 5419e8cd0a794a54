"""Column types shared by the models.

JSON columns use JSONB on PostgreSQL and plain JSON elsewhere so the
schema can be created on SQLite for tests.
"""

from __future__ import annotations

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

JsonColumn = JSON().with_variant(JSONB(), "postgresql")
