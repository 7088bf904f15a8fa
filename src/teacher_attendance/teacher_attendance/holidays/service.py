from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike, coerce_date, month_bounds
from ..common.validators import require_non_empty
from ..core.enums import HolidayType
from ..core.exceptions import NotFoundError, ValidationError
from .model import Holiday
from .registry import HolidayRegistry
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    """Use case: manage the holiday calendar."""

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def add_holiday(self, *, holiday_date: DateLike, name: str, holiday_type: str | HolidayType = HolidayType.FESTIVAL) -> Holiday:
        name = require_non_empty(name, "Holiday name")
        d = coerce_date(holiday_date)
        try:
            kind = HolidayType(holiday_type)
        except ValueError as exc:
            raise ValidationError(f"Unknown holiday type: {holiday_type!r}") from exc

        self._holidays.upsert(holiday_date=d, name=name, holiday_type=kind)
        logger.info("Holiday saved: %s %s (%s)", d, name, kind.value)
        return Holiday(date=d, name=name, type=kind)

    def remove_holiday(self, holiday_date: DateLike) -> None:
        d = coerce_date(holiday_date)
        if not self._holidays.delete_by_date(d):
            raise NotFoundError(f"No holiday on {d}")
        logger.info("Holiday removed: %s", d)

    def list_holidays(self, *, start: Optional[date] = None, end: Optional[date] = None) -> list[Holiday]:
        return list(self.registry(start=start, end=end))

    def list_for_month(self, year: int, month: int) -> list[Holiday]:
        start, end = month_bounds(year, month)
        return self.list_holidays(start=start, end=end)

    def registry(self, *, start: Optional[date] = None, end: Optional[date] = None) -> HolidayRegistry:
        return HolidayRegistry(self._holidays.list_holidays(start=start, end=end))
