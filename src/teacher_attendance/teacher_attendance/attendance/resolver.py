from __future__ import annotations

from datetime import date, timedelta
from typing import Optional, Sequence, Union

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..days.model import DayInfo
from ..days.service import day_info, days_in_month, days_in_range
from ..holidays.registry import HolidayRegistry
from .model import EffectiveDay
from .rules.base import ResolutionRule, RuleContext
from .rules.base_status_rule import BaseStatusRule
from .rules.holiday_rule import HolidayRule
from .rules.sunday_bracket_rule import SundayBracketRule
from .snapshot import AttendanceSnapshot

DEFAULT_RULES: tuple[ResolutionRule, ...] = (BaseStatusRule(), HolidayRule(), SundayBracketRule())


def resolution_window(start: date, end: date) -> tuple[date, date]:
    """Raw data needed to resolve [start, end]: one extra day on each side for brackets.

    Raises ValidationError when a neighbouring day falls outside the calendar.
    """
    if start <= date.min or end >= date.max:
        raise ValidationError(f"Dates must lie strictly between {date.min} and {date.max}")
    return start - timedelta(days=1), end + timedelta(days=1)


class StatusResolver:
    """Derives the effective status of a teacher on a day from raw marks and holidays.

    Rules run once each, in order, and only read raw data, so the result
    for one day never depends on how other days resolved.
    """

    def __init__(self, rules: Optional[Sequence[ResolutionRule]] = None):
        self._rules = tuple(rules) if rules is not None else DEFAULT_RULES

    def resolve(
        self,
        teacher_id: int,
        day: Union[DayInfo, date],
        snapshot: AttendanceSnapshot,
        holidays: HolidayRegistry,
    ) -> AttendanceStatus:
        info = day if isinstance(day, DayInfo) else day_info(day)
        resolution_window(info.date, info.date)
        ctx = RuleContext(teacher_id=int(teacher_id), day=info, snapshot=snapshot, holidays=holidays)

        status: Optional[AttendanceStatus] = None
        for rule in self._rules:
            status = rule.apply(ctx, status)

        if status is None:
            raise RuntimeError("Resolution rules produced no status")
        return status

    def resolve_days(
        self,
        teacher_id: int,
        days: Sequence[DayInfo],
        snapshot: AttendanceSnapshot,
        holidays: HolidayRegistry,
    ) -> list[EffectiveDay]:
        return [
            EffectiveDay(
                teacher_id=int(teacher_id),
                date=d.date,
                status=self.resolve(teacher_id, d, snapshot, holidays),
                raw_status=snapshot.status(teacher_id, d.date),
                is_sunday=d.is_sunday,
                is_holiday=holidays.is_holiday(d.date),
            )
            for d in days
        ]

    def resolve_month(
        self,
        teacher_id: int,
        year: int,
        month: int,
        snapshot: AttendanceSnapshot,
        holidays: HolidayRegistry,
    ) -> list[EffectiveDay]:
        return self.resolve_days(teacher_id, days_in_month(year, month), snapshot, holidays)

    def resolve_range(
        self,
        teacher_id: int,
        start: date,
        end: date,
        snapshot: AttendanceSnapshot,
        holidays: HolidayRegistry,
    ) -> list[EffectiveDay]:
        return self.resolve_days(teacher_id, days_in_range(start, end), snapshot, holidays)
