from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator, Optional

from ..common.datetime_utils import month_bounds
from .model import Holiday


class HolidayRegistry:
    """Mutable set of holidays keyed by date.

    Two holidays on the same date are one holiday; the last one added wins.
    """

    def __init__(self, holidays: Iterable[Holiday] = ()):
        self._by_date: dict[date, Holiday] = {}
        for h in holidays:
            self.add(h)

    def add(self, holiday: Holiday) -> None:
        self._by_date[holiday.date] = holiday

    def remove(self, d: date) -> bool:
        return self._by_date.pop(d, None) is not None

    def get(self, d: date) -> Optional[Holiday]:
        return self._by_date.get(d)

    def is_holiday(self, d: date) -> bool:
        return d in self._by_date

    def in_range(self, start: date, end: date) -> list[Holiday]:
        return sorted((h for d, h in self._by_date.items() if start <= d <= end), key=lambda h: h.date)

    def for_month(self, year: int, month: int) -> list[Holiday]:
        return self.in_range(*month_bounds(year, month))

    def __contains__(self, d: object) -> bool:
        return d in self._by_date

    def __iter__(self) -> Iterator[Holiday]:
        return iter(sorted(self._by_date.values(), key=lambda h: h.date))

    def __len__(self) -> int:
        return len(self._by_date)
