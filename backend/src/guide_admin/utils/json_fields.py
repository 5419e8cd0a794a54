"""Parse-tolerant decoding for JSON-bearing columns.

Columns such as ``facilities``, ``tickets``, ``attributes`` and
``service_data`` may come back from storage as a parsed object, as a
JSON-encoded string, or as NULL. Every read path decodes them through
``decode_json_field`` so the string/object ambiguity is handled once.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any
from typing import Optional

from guide_admin.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding a JSON-bearing value.

    Exactly one of ``value`` or ``error`` is meaningful: ``error`` is set
    when the input could not be decoded into the expected container type.
    """

    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode_json_field(value: Any, expected: type = dict) -> DecodeResult:
    """Decode a stored JSON value that may be a string or a parsed object.

    Args:
        value: Raw column value (None, str, dict or list).
        expected: Container type the decoded value must have.

    Returns:
        DecodeResult with the decoded value, or with an error message.
        None and blank strings decode to an empty value without error.
    """
    if value is None:
        return DecodeResult(value=expected())
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        if not value.strip():
            return DecodeResult(value=expected())
        try:
            value = json.loads(value)
        except json.JSONDecodeError as exc:
            return DecodeResult(error=f"Invalid JSON: {exc.msg}")
    if not isinstance(value, expected):
        return DecodeResult(
            error=f"Expected {expected.__name__}, got {type(value).__name__}"
        )
    return DecodeResult(value=value)


def decode_or_default(
    value: Any,
    default: Any = None,
    field: str = "",
    expected: type = dict,
) -> Any:
    """Decode a JSON-bearing value, falling back to a default on failure.

    Parse failures are logged and never raised.

    Args:
        value: Raw column value.
        default: Value returned on failure. Defaults to an empty container.
        field: Column name, used only for logging.
        expected: Container type the decoded value must have.
    """
    result = decode_json_field(value, expected=expected)
    if result.ok:
        return result.value
    logger.warning(
        f"Could not decode JSON column {field or '<unknown>'}",
        extra={"field": field, "error": result.error},
    )
    return expected() if default is None else default


def encode_json_field(value: Any) -> Optional[str]:
    """Serialise a value for a JSON-bearing column, passing None through."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), sort_keys=False)
