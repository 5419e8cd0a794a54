"""Authentication helpers."""

from guide_admin.auth.jwt_validator import (
    JWTValidationError,
    TokenClaims,
    decode_and_verify_token,
    extract_bearer_token,
)

__all__ = [
    "JWTValidationError",
    "TokenClaims",
    "decode_and_verify_token",
    "extract_bearer_token",
]
