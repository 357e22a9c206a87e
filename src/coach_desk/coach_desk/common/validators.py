"""Parsing boundary for loosely typed input (form strings, JSON values).

Every service calls these before touching a repository, so malformed money,
status or contact values are rejected in one place.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional, Type, TypeVar

from ..core.constants import API_KEY_VISIBLE_CHARS
from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def optional_email(value) -> Optional[str]:
    email = optional_text(value)
    if email is not None and "@" not in email:
        raise ValidationError("Please enter a valid email address")
    return email


def require_email(value) -> str:
    email = require_non_empty(value, "Email")
    if "@" not in email:
        raise ValidationError("Please enter a valid email address")
    return email


def _to_number(value) -> float:
    if isinstance(value, bool):
        raise ValueError("bool is not an amount")
    number = float(str(value).strip()) if isinstance(value, str) else float(value)
    if math.isnan(number) or math.isinf(number):
        raise ValueError("not a finite number")
    return number


def parse_amount(value, field_name: str = "Amount") -> float:
    """Strict money parser: must be a finite number greater than zero."""
    try:
        number = _to_number(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return number


def parse_flag(value, field_name: str) -> bool:
    """JSON booleans or 0/1 only; strings like "false" are not guessed at."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValidationError(f"{field_name} must be true or false")


def parse_fee(value) -> float:
    """Lenient fee parser: omitted or unparsable fees default to 0."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0.0
    try:
        number = _to_number(value)
    except (TypeError, ValueError):
        return 0.0
    if number < 0:
        raise ValidationError("Monthly fee cannot be negative")
    return number


def parse_id(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not a valid id") from None
    if number <= 0:
        raise ValidationError(f"{field_name} is not a valid id")
    return number


def parse_choice(value, enum_cls: Type[E], field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None


def mask_secret(value: Optional[str], *, visible: int = API_KEY_VISIBLE_CHARS) -> str:
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
