from __future__ import annotations

from datetime import date, datetime

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value).strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


def as_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
