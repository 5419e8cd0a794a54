"""Shared pieces of the form schemas.

Forms are pydantic models over the camelCase view model. ``validate_form``
runs a model against candidate data and reports field-level violations
with dotted paths instead of raising.
"""

from __future__ import annotations

import os
import re
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Annotated, Any, ClassVar, Iterable, Mapping, Optional
from urllib.parse import urlparse

import phonenumbers
from phonenumbers.phonenumberutil import NumberParseException
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

MAX_URL_LENGTH = 2048
MAX_EMAIL_LENGTH = 320
MAX_NAME_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 5000

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Violation:
    """A single field-level validation failure."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class FormModel(BaseModel):
    """Base for form schemas: unknown and read-only keys are ignored.

    ``related_fields`` maps a top-level key to the keys whose validity
    depends on it, so a partial update that changes the key is also
    checked against them.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    related_fields: ClassVar[dict[str, tuple[str, ...]]] = {}


@lru_cache(maxsize=1)
def _valid_currencies() -> frozenset[str]:
    """Return cached ISO 4217 currency codes."""
    import pycountry

    codes: set[str] = set()
    for currency in pycountry.currencies:
        code = getattr(currency, "alpha_3", None)
        if code:
            codes.add(code.upper())
    return frozenset(codes)


def check_url(value: str) -> str:
    """Require an http(s) URL with a host."""
    value = value.strip()
    if len(value) > MAX_URL_LENGTH:
        raise ValueError(f"must be at most {MAX_URL_LENGTH} characters")
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"}:
        raise ValueError("must use http or https scheme")
    if not parsed.netloc:
        raise ValueError("must have a valid domain")
    return value


def check_optional_url(value: str) -> str:
    """Like check_url, but the empty string means "not set"."""
    if not value or not value.strip():
        return ""
    return check_url(value)


def check_optional_email(value: str) -> str:
    if not value or not value.strip():
        return ""
    value = value.strip()
    if len(value) > MAX_EMAIL_LENGTH or not EMAIL_RE.match(value):
        raise ValueError("must be a valid email address")
    return value


def check_optional_phone(value: str) -> str:
    """Require a possible phone number; national numbers use the default region."""
    if not value or not value.strip():
        return ""
    region = os.getenv("DEFAULT_PHONE_REGION", "TH")
    try:
        parsed = phonenumbers.parse(value, region)
    except NumberParseException as exc:
        raise ValueError("must be a valid phone number") from exc
    if not phonenumbers.is_possible_number(parsed):
        raise ValueError("must be a valid phone number")
    return value.strip()


def check_optional_currency(value: str) -> str:
    if not value or not value.strip():
        return ""
    code = value.strip().upper()
    if code not in _valid_currencies():
        raise ValueError("must be a valid ISO 4217 currency code")
    return code


Url = Annotated[str, AfterValidator(check_url)]
OptionalUrl = Annotated[str, AfterValidator(check_optional_url)]
OptionalEmail = Annotated[str, AfterValidator(check_optional_email)]
OptionalPhone = Annotated[str, AfterValidator(check_optional_phone)]
OptionalCurrency = Annotated[str, AfterValidator(check_optional_currency)]
Latitude = Annotated[float, Field(ge=-90, le=90)]
Longitude = Annotated[float, Field(ge=-180, le=180)]
Rating = Annotated[float, Field(ge=0, le=5)]


class CoordinatesForm(FormModel):
    latitude: Latitude = 0
    longitude: Longitude = 0


def _message(error: Mapping[str, Any]) -> str:
    message = str(error.get("msg", "Invalid value"))
    for prefix in ("Value error, ", "Assertion failed, "):
        if message.startswith(prefix):
            return message[len(prefix):]
    return message


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def _scope(schema: type[BaseModel], fields: Iterable[str]) -> set[str]:
    related = getattr(schema, "related_fields", {})
    scope = set(fields)
    for field in list(scope):
        scope.update(related.get(field, ()))
    return scope


def validate_form(
    schema: type[BaseModel],
    data: Optional[Mapping[str, Any]],
    fields: Optional[Iterable[str]] = None,
) -> list[Violation]:
    """Validate candidate view-model data against a form schema.

    Args:
        schema: The pydantic form model.
        data: Candidate view-model values.
        fields: When given, only violations under these top-level keys
            (and their related keys) are reported. Partial updates pass
            the keys they change.

    Returns:
        Violations with dotted field paths; an empty list means valid.
    """
    try:
        schema.model_validate(dict(data or {}))
    except PydanticValidationError as exc:
        violations = [
            Violation(field=_field_path(tuple(error["loc"])), message=_message(error))
            for error in exc.errors()
        ]
    else:
        return []
    if fields is None:
        return violations
    scope = _scope(schema, fields)
    return [v for v in violations if v.field.split(".", 1)[0] in scope]
