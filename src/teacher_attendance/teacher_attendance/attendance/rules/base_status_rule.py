from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from .base import ResolutionRule, RuleContext


class BaseStatusRule(ResolutionRule):
    """Raw mark if any; otherwise Sundays are paid (present) and other days absent."""

    def apply(self, ctx: RuleContext, current: Optional[AttendanceStatus]) -> Optional[AttendanceStatus]:
        raw = ctx.raw()
        if raw is not None:
            return raw
        if ctx.day.is_sunday:
            return AttendanceStatus.PRESENT
        return AttendanceStatus.ABSENT
