from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from ...core.enums import AttendanceStatus
from ...days.model import DayInfo
from ...holidays.registry import HolidayRegistry
from ..snapshot import AttendanceSnapshot


@dataclass(frozen=True)
class RuleContext:
    """What a rule may look at: raw marks and the holiday calendar, never resolved days."""

    teacher_id: int
    day: DayInfo
    snapshot: AttendanceSnapshot
    holidays: HolidayRegistry

    def raw(self, offset_days: int = 0) -> Optional[AttendanceStatus]:
        return self.snapshot.status(self.teacher_id, self.day.date + timedelta(days=offset_days))

    def bracketed_by_absence(self) -> bool:
        """Raw status is exactly ABSENT on both the day before and the day after."""
        return self.raw(-1) == AttendanceStatus.ABSENT and self.raw(1) == AttendanceStatus.ABSENT

    @property
    def is_holiday(self) -> bool:
        return self.holidays.is_holiday(self.day.date)


class ResolutionRule(ABC):
    """Strategy Pattern: one step of effective-status resolution."""

    @abstractmethod
    def apply(self, ctx: RuleContext, current: Optional[AttendanceStatus]) -> Optional[AttendanceStatus]:
        raise NotImplementedError
