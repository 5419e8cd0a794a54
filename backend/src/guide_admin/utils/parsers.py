"""Shared parsing utilities for request handling."""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any
from typing import Mapping
from typing import Optional

_LEADING_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer from a string.

    Args:
        value: The string value to parse, or None.

    Returns:
        The parsed integer, or None if input is None or empty.

    Raises:
        ValueError: If the string cannot be converted to an integer.
    """
    if value is None or value == "":
        return None
    return int(value)


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 datetime string.

    Handles both 'Z' suffix and '+00:00' timezone notation.

    Args:
        value: The ISO-8601 datetime string to parse, or None.

    Returns:
        The parsed datetime, or None if input is None or empty.

    Raises:
        ValueError: If the string cannot be parsed as an ISO datetime.
    """
    if value is None or value == "":
        return None
    cleaned = value.replace("Z", "+00:00") if value.endswith("Z") else value
    return datetime.fromisoformat(cleaned)


def parse_bool(value: Any) -> Optional[bool]:
    """Parse a boolean from a JSON value or query string.

    Args:
        value: A bool, or a string such as "true"/"false"/"1"/"0".

    Returns:
        The parsed boolean, or None if input is None or empty.

    Raises:
        ValueError: If the value is not a recognised boolean.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in {"1", "true", "yes"}:
        return True
    if lowered in {"0", "false", "no"}:
        return False
    raise ValueError(f"Invalid boolean: {value}")


def parse_leading_float(value: Any) -> Optional[float]:
    """Parse the leading number of a value, ignoring trailing text.

    "12.50 THB" parses as 12.5. Values without a leading number, and
    non-finite results, parse as None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER_RE.match(str(value))
        if not match:
            return None
        number = float(match.group(0))
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def first_param(params: dict[str, list[str]], key: str) -> Optional[str]:
    """Return the first query parameter value for a key.

    Args:
        params: Dictionary of parameter name to list of values.
        key: The parameter name to look up.

    Returns:
        The first value for the key, or None if not present.
    """
    values = params.get(key, [])
    return values[0] if values else None


def collect_query_params(event: Mapping[str, Any]) -> dict[str, list[str]]:
    """Collect query parameters from API Gateway events.

    Handles both single and multi-value query string parameters.

    Args:
        event: The API Gateway event dictionary.

    Returns:
        Dictionary mapping parameter names to lists of values.
    """
    params: dict[str, list[str]] = {}
    single = event.get("queryStringParameters") or {}
    multi = event.get("multiValueQueryStringParameters") or {}

    for key, value in single.items():
        if value is None:
            continue
        params.setdefault(key, []).append(value)

    for key, values in multi.items():
        if not values:
            continue
        for value in values:
            if value is None:
                continue
            if value not in params.get(key, []):
                params.setdefault(key, []).append(value)

    return params
