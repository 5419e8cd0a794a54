"""Form schema for services."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from guide_admin.schemas.items import BaseItemForm


class ServiceForm(BaseItemForm):
    """Validation rules for the service create/edit form."""

    serviceData: dict[str, Any] = Field(default_factory=dict)
