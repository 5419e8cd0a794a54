"""API Gateway proxy responses for the admin Lambda.

Every response carries the same security headers and a CORS origin
chosen from ``CORS_ALLOWED_ORIGINS`` (comma separated). Admin responses
hold unpublished content, so none of them may be cached.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, is_dataclass
from typing import Any
from typing import Mapping
from typing import Optional

from pydantic import BaseModel

from guide_admin.exceptions import ValidationError

BODY_METHODS = ("POST", "PUT", "PATCH")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    # Legacy filter header, still honoured by older embedded browsers.
    "X-XSS-Protection": "1; mode=block",
    "Cache-Control": "no-store, no-cache, must-revalidate",
    "Pragma": "no-cache",
}

ALLOWED_METHODS = "GET,POST,PUT,PATCH,DELETE,OPTIONS"
ALLOWED_HEADERS = "Content-Type,Authorization"

# The dashboard dev server; deployments set CORS_ALLOWED_ORIGINS.
_LOCAL_ORIGINS = ("http://localhost:3000", "http://localhost")


def _header(event: Mapping[str, Any], name: str) -> Optional[str]:
    """Case-insensitive request header lookup."""
    for key, value in (event.get("headers") or {}).items():
        if key.lower() == name:
            return None if value is None else str(value)
    return None


def validate_content_type(
    event: Mapping[str, Any],
    required_methods: tuple[str, ...] = BODY_METHODS,
) -> None:
    """Require a JSON Content-Type on requests that send a view model.

    Raises:
        ValidationError: If the header is missing or not application/json.
    """
    if event.get("httpMethod", "") not in required_methods:
        return

    content_type = (_header(event, "content-type") or "").lower().strip()
    if not content_type:
        raise ValidationError(
            "Content-Type header is required for requests with a body",
            field="Content-Type",
        )
    # "application/json; charset=utf-8" is accepted.
    if content_type.split(";", 1)[0].strip() != "application/json":
        raise ValidationError(
            "Content-Type must be application/json",
            field="Content-Type",
        )


def allowed_origins() -> list[str]:
    configured = os.getenv("CORS_ALLOWED_ORIGINS", "")
    origins = [origin.strip() for origin in configured.split(",") if origin.strip()]
    return origins or list(_LOCAL_ORIGINS)


def get_cors_headers(event: Optional[Mapping[str, Any]] = None) -> dict[str, str]:
    """CORS headers echoing the request origin when it is allowed.

    Unknown origins get the first allowed origin, which the browser then
    rejects.
    """
    origins = allowed_origins()
    request_origin = _header(event, "origin") if event else None
    allow_origin = request_origin if request_origin in origins else origins[0]
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
    }


def json_response(
    status_code: int,
    body: Any,
    headers: Optional[dict[str, str]] = None,
    event: Optional[Mapping[str, Any]] = None,
) -> dict[str, Any]:
    """Build a proxy response with a JSON body.

    Args:
        status_code: HTTP status code.
        body: A JSON-ready value, a pydantic model or a dataclass.
        headers: Extra headers, applied last.
        event: The request, used to pick the CORS origin.
    """
    response_headers = {"Content-Type": "application/json"}
    response_headers.update(SECURITY_HEADERS)
    response_headers.update(get_cors_headers(event))
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": json.dumps(_to_json(body), default=str),
    }


def _to_json(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(by_alias=True)
    if is_dataclass(body) and not isinstance(body, type):
        return asdict(body)
    return body
