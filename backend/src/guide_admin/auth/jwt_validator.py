"""Bearer token verification for admin requests.

Sessions are issued by the auth provider as HS256-signed JWTs. The
shared signing secret is read from ``AUTH_JWT_SECRET`` and the expected
audience from ``AUTH_JWT_AUDIENCE`` (default "authenticated").

SECURITY NOTES:
- Claims are only trusted after signature, expiry and audience checks
- Tokens are never logged
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import jwt

from guide_admin.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_AUDIENCE = "authenticated"


@dataclass
class TokenClaims:
    """Validated claims from a session token."""

    sub: str
    email: str
    exp: int
    raw_claims: dict[str, Any]


class JWTValidationError(Exception):
    """Raised when JWT validation fails."""

    def __init__(self, message: str, reason: str = "invalid_token"):
        super().__init__(message)
        self.message = message
        self.reason = reason


def _get_secret() -> str:
    secret = os.getenv("AUTH_JWT_SECRET")
    if not secret:
        raise JWTValidationError(
            "AUTH_JWT_SECRET environment variable not set",
            reason="misconfigured",
        )
    return secret


def extract_bearer_token(headers: Optional[Mapping[str, Any]]) -> Optional[str]:
    """Return the bearer token from an Authorization header, if any."""
    for key, value in (headers or {}).items():
        if key.lower() != "authorization" or not value:
            continue
        scheme, _, token = str(value).partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()
    return None


def decode_and_verify_token(
    token: str,
    secret: Optional[str] = None,
    audience: Optional[str] = None,
    verify_expiration: bool = True,
) -> TokenClaims:
    """Decode and verify a session token.

    Args:
        token: The JWT string.
        secret: Signing secret (reads AUTH_JWT_SECRET if not provided).
        audience: Expected audience (reads AUTH_JWT_AUDIENCE if not provided).
        verify_expiration: Whether to verify token expiration.

    Returns:
        TokenClaims with validated claims.

    Raises:
        JWTValidationError: If token validation fails.
    """
    signing_secret = secret or _get_secret()
    expected_audience = audience or os.getenv("AUTH_JWT_AUDIENCE") or DEFAULT_AUDIENCE

    try:
        decoded = jwt.decode(
            token,
            signing_secret,
            algorithms=["HS256"],
            audience=expected_audience,
            options={
                "verify_signature": True,
                "verify_exp": verify_expiration,
                "verify_aud": True,
                "require": ["sub", "exp"],
            },
        )
    except jwt.ExpiredSignatureError as exc:
        raise JWTValidationError("Token has expired", reason="token_expired") from exc
    except jwt.InvalidAudienceError as exc:
        raise JWTValidationError(
            "Invalid token audience", reason="invalid_audience"
        ) from exc
    except jwt.InvalidSignatureError as exc:
        raise JWTValidationError(
            "Invalid token signature", reason="invalid_signature"
        ) from exc
    except jwt.MissingRequiredClaimError as exc:
        raise JWTValidationError(
            f"Missing required claim: {exc}", reason="invalid_token"
        ) from exc
    except jwt.PyJWTError as exc:
        logger.warning(f"Token verification failed: {type(exc).__name__}")
        raise JWTValidationError(
            "Token verification failed", reason="invalid_token"
        ) from exc

    return TokenClaims(
        sub=str(decoded.get("sub", "")),
        email=str(decoded.get("email", "")),
        exp=int(decoded.get("exp", 0)),
        raw_claims=decoded,
    )
