from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ...attendance.model import EffectiveDay
from ...common.numbers import round_to_int
from ...core.constants import FREE_LEAVE_DAYS_PER_MONTH, PERFECT_ATTENDANCE_BONUS_DAYS, SALARY_DAY_DIVISOR
from ...core.enums import AttendanceStatus
from ...teachers.model import Teacher
from ..model import SalaryResult
from .base import SalaryCalculator, StatusInput


def _status_of(item: StatusInput) -> AttendanceStatus:
    return item.status if isinstance(item, EffectiveDay) else AttendanceStatus(item)


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: base_salary / 30 per day; late counts as present.

    One absence a month is paid leave. A month without any absence earns
    one extra day's pay.
    """

    def compute(self, teacher: Teacher, statuses: Iterable[StatusInput]) -> SalaryResult:
        days_present = 0
        days_absent = 0
        for item in statuses:
            status = _status_of(item)
            if status in (AttendanceStatus.PRESENT, AttendanceStatus.LATE):
                days_present += 1
            elif status == AttendanceStatus.ABSENT:
                days_absent += 1

        days_leave = min(days_absent, FREE_LEAVE_DAYS_PER_MONTH)
        days_absent -= days_leave
        bonus = PERFECT_ATTENDANCE_BONUS_DAYS if days_absent == 0 and days_leave == 0 else 0

        daily_wage = Decimal(str(teacher.base_salary or 0)) / SALARY_DAY_DIVISOR
        computed = daily_wage * (days_present + bonus) + daily_wage * days_leave
        deductions = daily_wage * days_absent

        return SalaryResult(
            teacher_id=teacher.teacher_id,
            days_present=days_present,
            days_absent=days_absent,
            days_leave=days_leave,
            bonus=bonus,
            computed_salary=round_to_int(computed),
            deductions=round_to_int(deductions),
        )
