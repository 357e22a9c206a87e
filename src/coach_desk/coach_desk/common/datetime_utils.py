from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from ..core.exceptions import ValidationError

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_iso_date(value) -> date:
    """Parse YYYY-MM-DD string (or pass through a date) into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def parse_month(value) -> str:
    """Validate a YYYY-MM month tag."""
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m")
    text = str(value or "").strip()
    if not _MONTH_RE.match(text):
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM")
    return text


def parse_timestamp(value) -> datetime:
    """Accept ISO datetimes and SQLite CURRENT_TIMESTAMP strings."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return datetime.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid timestamp {value!r}") from None


def month_of(day: date) -> str:
    return day.strftime("%Y-%m")


def month_bounds(month: str) -> tuple[date, date]:
    """First and last calendar day of a YYYY-MM month."""
    month = parse_month(month)
    year, mon = (int(p) for p in month.split("-"))
    start = date(year, mon, 1)
    if mon == 12:
        end = date(year, 12, 31)
    else:
        end = date(year, mon + 1, 1) - timedelta(days=1)
    return start, end


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
