"""Utility modules for the admin backend."""

from guide_admin.utils.json_fields import (
    DecodeResult,
    decode_json_field,
    decode_or_default,
    encode_json_field,
)
from guide_admin.utils.parsers import (
    parse_bool,
    parse_datetime,
    parse_int,
    parse_leading_float,
)
from guide_admin.utils.responses import json_response
from guide_admin.utils.logging import (
    configure_logging,
    get_logger,
    mask_email,
    mask_pii,
    set_request_context,
    clear_request_context,
)

__all__ = [
    "DecodeResult",
    "clear_request_context",
    "configure_logging",
    "decode_json_field",
    "decode_or_default",
    "encode_json_field",
    "get_logger",
    "json_response",
    "mask_email",
    "mask_pii",
    "parse_bool",
    "parse_datetime",
    "parse_int",
    "parse_leading_float",
    "set_request_context",
]
