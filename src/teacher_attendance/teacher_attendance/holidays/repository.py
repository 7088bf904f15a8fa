from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import HolidayType
from .model import Holiday


class HolidayRepository(Protocol):
    def list_holidays(self, *, start: Optional[date] = None, end: Optional[date] = None) -> Sequence[Holiday]:
        raise NotImplementedError

    def upsert(self, *, holiday_date: date, name: str, holiday_type: HolidayType) -> None:
        """One holiday per date: a second add for the same date replaces the first."""

        raise NotImplementedError

    def delete_by_date(self, holiday_date: date) -> bool:
        raise NotImplementedError
