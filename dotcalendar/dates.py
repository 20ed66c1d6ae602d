from __future__ import annotations

from datetime import date, datetime

from .errors import InvalidInput


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def day_of_year(day: date) -> int:
    """1-based ordinal day of ``day`` within its year."""
    return day.timetuple().tm_yday


def weeks_between(start: date, end: date) -> int:
    """Whole weeks from ``start`` to ``end``, floored (negative if ``end`` is earlier)."""
    return (end - start).days // 7


def parse_birthday(value: str | None) -> date:
    """Parse an ISO birthday, accepting a full ISO datetime as well."""

    trimmed = (value or "").strip()
    if not trimmed:
        raise InvalidInput("Invalid birthday")
    try:
        return date.fromisoformat(trimmed)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(trimmed).date()
    except ValueError:
        raise InvalidInput("Invalid birthday") from None
