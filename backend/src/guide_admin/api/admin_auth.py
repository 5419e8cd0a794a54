"""Authorization helpers for admin APIs and actions.

Every admin operation goes through ``check_admin``, which returns a
tagged result instead of a boolean:

- ``Unauthorized`` when there is no authenticated principal
- ``Forbidden`` when the principal has no profile or is not an admin
- ``Ok`` carrying the principal otherwise
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from sqlalchemy.orm import Session

from guide_admin.auth.jwt_validator import (
    JWTValidationError,
    decode_and_verify_token,
    extract_bearer_token,
)
from guide_admin.db.repositories import ProfileRepository
from guide_admin.exceptions import AuthenticationError, AuthorizationError
from guide_admin.utils.logging import get_logger, mask_pii

logger = get_logger(__name__)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller."""

    user_id: str
    email: str = ""


@dataclass(frozen=True)
class Ok:
    principal: Principal


@dataclass(frozen=True)
class Unauthorized:
    reason: str = "Unauthorized - Not authenticated"
    status_code: int = 401


@dataclass(frozen=True)
class Forbidden:
    user_id: str
    reason: str = "Forbidden - Admin access required"
    status_code: int = 403


GuardResult = Union[Ok, Unauthorized, Forbidden]


def _get_authorizer_context(event: Mapping[str, Any]) -> dict[str, Any]:
    """Extract authorizer context from the event.

    Supports both:
    - Lambda authorizers (context fields directly in authorizer)
    - Cognito-style authorizers (claims nested under authorizer.claims)
    """
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}

    # Lambda authorizer puts context fields directly
    if "userSub" in authorizer:
        return {
            "sub": authorizer.get("userSub", ""),
            "email": authorizer.get("email", ""),
        }

    claims = authorizer.get("claims") or {}
    return {
        "sub": claims.get("sub", ""),
        "email": claims.get("email", ""),
    }


def get_event_principal(event: Mapping[str, Any]) -> Optional[Principal]:
    """Identify the caller of an API Gateway event.

    Uses the authorizer context when present, otherwise a verified
    ``Authorization: Bearer`` token.
    """
    ctx = _get_authorizer_context(event)
    if ctx.get("sub"):
        return Principal(user_id=str(ctx["sub"]), email=str(ctx.get("email") or ""))

    token = extract_bearer_token(event.get("headers"))
    if not token:
        return None
    try:
        claims = decode_and_verify_token(token)
    except JWTValidationError as exc:
        logger.warning(
            f"Rejected bearer token: {exc.reason}",
            extra={"reason": exc.reason},
        )
        return None
    return Principal(user_id=claims.sub, email=claims.email)


def check_admin(session: Session, user_id: Optional[str]) -> GuardResult:
    """Check that a user id belongs to an admin profile.

    Args:
        session: Database session used to read the caller's profile.
        user_id: Authenticated subject, or None when unauthenticated.
    """
    if not user_id:
        return Unauthorized()

    is_admin = ProfileRepository(session).is_admin(user_id)
    if not is_admin:
        logger.warning(
            "Admin access denied",
            extra={
                "user_id": mask_pii(user_id),
                "has_profile": is_admin is not None,
            },
        )
        return Forbidden(user_id=user_id)

    return Ok(principal=Principal(user_id=user_id))


def require_admin(session: Session, user_id: Optional[str]) -> Principal:
    """Return the admin principal or raise the matching AppError."""
    result = check_admin(session, user_id)
    if isinstance(result, Unauthorized):
        raise AuthenticationError(result.reason)
    if isinstance(result, Forbidden):
        raise AuthorizationError(result.reason)
    return result.principal
