from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from .base import ResolutionRule, RuleContext


class SundayBracketRule(ResolutionRule):
    """Unmarked Sunday between an absent Saturday and an absent Monday is absent."""

    def apply(self, ctx: RuleContext, current: Optional[AttendanceStatus]) -> Optional[AttendanceStatus]:
        if not ctx.day.is_sunday or ctx.raw() is not None:
            return current
        if ctx.bracketed_by_absence():
            return AttendanceStatus.ABSENT
        return current
