# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Sign-up form rules: sanitising and validation.

Both functions are pure and never raise. They accept either a
``SubscriptionInput`` or a plain mapping keyed by the wire names
(``email``, ``firstName``, ``lastName``) or the snake_case names.
"""
import re
from typing import Any, Mapping, Optional, Union

from pydantic.alias_generators import to_camel

from newsletter.core import messages
from newsletter.models.domain import MAX_FIELD_LENGTH, SubscriptionInput, ValidationResult

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_NAME_LENGTH = 2

RawSubscription = Union[SubscriptionInput, Mapping[str, Any]]


def _field(raw: RawSubscription, name: str) -> Any:
    if isinstance(raw, SubscriptionInput):
        return getattr(raw, name)
    camel = to_camel(name)
    if camel in raw:
        return raw[camel]
    return raw.get(name)


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def is_valid_email(email: Any) -> bool:
    if not isinstance(email, str) or not email:
        return False
    return EMAIL_PATTERN.match(email.strip()) is not None


def is_valid_name(name: Any) -> bool:
    if not isinstance(name, str) or not name:
        return False
    return len(name.strip()) >= MIN_NAME_LENGTH


def sanitize_subscription(raw: RawSubscription) -> SubscriptionInput:
    """Trim every field, lowercase the email. Missing fields become ``""``."""
    email = _text(_field(raw, "email"))
    first_name = _text(_field(raw, "first_name"))
    last_name = _text(_field(raw, "last_name"))
    return SubscriptionInput(
        email=email.strip().lower() if email else "",
        first_name=first_name.strip() if first_name else "",
        last_name=last_name.strip() if last_name else "",
    )


def validate_subscription(candidate: RawSubscription) -> ValidationResult:
    """Check all three fields and collect every error, email first."""
    errors = []

    email = _text(_field(candidate, "email"))
    if not email or not email.strip():
        errors.append(messages.EMAIL_REQUIRED)
    elif len(email.strip()) > MAX_FIELD_LENGTH:
        errors.append(messages.EMAIL_TOO_LONG)
    elif not is_valid_email(email):
        errors.append(messages.EMAIL_INVALID)

    for name, required, too_short, too_long in (
        ("first_name", messages.FIRST_NAME_REQUIRED,
         messages.FIRST_NAME_TOO_SHORT, messages.FIRST_NAME_TOO_LONG),
        ("last_name", messages.LAST_NAME_REQUIRED,
         messages.LAST_NAME_TOO_SHORT, messages.LAST_NAME_TOO_LONG),
    ):
        value = _text(_field(candidate, name))
        if not value or not value.strip():
            errors.append(required)
        elif not is_valid_name(value):
            errors.append(too_short)
        elif len(value.strip()) > MAX_FIELD_LENGTH:
            errors.append(too_long)

    return ValidationResult(is_valid=not errors, errors=errors)
