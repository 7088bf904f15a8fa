from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

from ..common.datetime_utils import month_bounds
from ..core.exceptions import ValidationError
from .model import DayInfo

SATURDAY = 5
SUNDAY = 6


def day_info(d: date) -> DayInfo:
    weekday = d.weekday()
    return DayInfo(
        date=d,
        day_number=d.day,
        is_weekend=weekday in (SATURDAY, SUNDAY),
        is_sunday=weekday == SUNDAY,
    )


def iter_days(start: date, end: date) -> Iterator[DayInfo]:
    """Inclusive day sequence from start to end."""
    if start > end:
        raise ValidationError(f"Start date {start} is after end date {end}")
    current = start
    while current <= end:
        yield day_info(current)
        current += timedelta(days=1)


def days_in_range(start: date, end: date) -> list[DayInfo]:
    return list(iter_days(start, end))


def days_in_month(year: int, month: int) -> list[DayInfo]:
    """Every day of the month, day 1 to the last day, in order."""
    first, last = month_bounds(year, month)
    return days_in_range(first, last)
