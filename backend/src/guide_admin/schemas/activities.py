"""Form schema for activities."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from guide_admin.schemas.items import BaseItemForm


class ActivityForm(BaseItemForm):
    activityData: dict[str, Any] = Field(default_factory=dict)
