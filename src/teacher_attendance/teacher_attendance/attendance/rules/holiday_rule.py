from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from .base import ResolutionRule, RuleContext


class HolidayRule(ResolutionRule):
    """A weekday/Saturday holiday is paid, unless absences on both sides bracket it.

    A LATE mark on the holiday itself is kept as LATE.
    """

    def apply(self, ctx: RuleContext, current: Optional[AttendanceStatus]) -> Optional[AttendanceStatus]:
        if ctx.day.is_sunday or not ctx.is_holiday:
            return current
        if ctx.bracketed_by_absence():
            return AttendanceStatus.ABSENT
        if ctx.raw() == AttendanceStatus.LATE:
            return AttendanceStatus.LATE
        return AttendanceStatus.PRESENT
