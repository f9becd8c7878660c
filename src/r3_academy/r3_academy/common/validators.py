from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number") from None
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_enum(value, enum_cls: type[E], field_name: str) -> E:
    """Accept an enum member or its string value."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None
