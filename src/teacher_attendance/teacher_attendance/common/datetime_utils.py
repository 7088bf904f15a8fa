from __future__ import annotations

import calendar as _calendar
from datetime import date, datetime
from typing import Union

from ..core.exceptions import ValidationError

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or a full YYYY-MM-DDTHH:MM[:SS] timestamp) into a date.

    Raises ValidationError for anything unparseable, including trailing text.
    """
    if not isinstance(value, str):
        raise ValidationError(f"Invalid date: {value!r}")
    text = value.strip()
    date_part, sep, time_part = text.partition("T")
    try:
        parsed = datetime.strptime(date_part, "%Y-%m-%d").date()
        if sep:
            # JavaScript toISOString() ends in "Z"
            if time_part.endswith("Z"):
                text = text[:-1] + "+00:00"
            datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {value!r}") from exc
    return parsed


def coerce_date(value: DateLike) -> date:
    """Accept date, datetime or ISO string (a full ISO timestamp is truncated to its date)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse 'YYYY-MM' into (year, month)."""
    try:
        parsed = datetime.strptime((value or "").strip(), "%Y-%m")
    except ValueError as exc:
        raise ValidationError(f"Invalid month: {value!r}") from exc
    return parsed.year, parsed.month


def validate_year_month(year: int, month: int) -> None:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid month: {month!r}")
    if not 1 <= int(year) <= 9999:
        raise ValidationError(f"Invalid year: {year!r}")


def month_bounds(year: int, month: int) -> tuple[date, date]:
    validate_year_month(year, month)
    last = _calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()
