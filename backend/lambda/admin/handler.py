"""Lambda entrypoint for the admin dashboard APIs."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from guide_admin.api.admin import lambda_handler as _handler


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the admin API router."""

    return _handler(event, context)
