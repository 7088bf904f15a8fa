from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from ..attendance.service import AttendanceService
from ..common.datetime_utils import month_bounds
from ..common.numbers import round_to_int
from ..teachers.model import Teacher
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import PayrollRow, PayrollSheet, PayrollSummary, SalaryResult

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "teacher_id",
    "teacher_name",
    "designation",
    "base_salary",
    "days_present",
    "days_absent",
    "days_leave",
    "bonus",
    "computed_salary",
    "deductions",
    "net_salary",
]


def summarize(rows: list[PayrollRow]) -> PayrollSummary:
    total_base = sum((r.base_salary for r in rows), Decimal(0))
    total_computed = sum(r.result.computed_salary for r in rows)
    total_deductions = sum(r.result.deductions for r in rows)
    total_net = sum(r.result.net_salary for r in rows)

    highest = max(rows, key=lambda r: r.result.net_salary, default=None)
    lowest = min(rows, key=lambda r: r.result.net_salary, default=None)

    return PayrollSummary(
        total_base_salary=total_base,
        total_computed_salary=total_computed,
        total_deductions=total_deductions,
        total_net_salary=total_net,
        average_net_salary=round_to_int(Decimal(total_net) / len(rows)) if rows else 0,
        highest_paid=highest.teacher_name if highest else None,
        lowest_paid=lowest.teacher_name if lowest else None,
    )


class PayrollService:
    """Use case: monthly salary sheet derived from effective attendance."""

    def __init__(
        self,
        attendance: AttendanceService,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._attendance = attendance
        self._calculator = calculator or StandardSalaryCalculator()

    def compute_for_teacher(self, teacher: Teacher, year: int, month: int) -> SalaryResult:
        grid = self._attendance.effective_month(year, month, teacher_id=teacher.teacher_id)
        return self._calculator.compute(teacher, grid.rows.get(teacher.teacher_id, []))

    def build_salary_sheet(self, *, year: int, month: int, teacher_id: Optional[int] = None) -> PayrollSheet:
        start, end = month_bounds(year, month)
        ids = [teacher_id] if teacher_id is not None else None
        effective = self._attendance.effective_range(start, end, teacher_ids=ids)

        rows = [
            PayrollRow(
                teacher_id=t.teacher_id,
                teacher_name=t.name,
                designation=t.designation,
                base_salary=t.base_salary,
                result=self._calculator.compute(t, effective.rows.get(t.teacher_id, [])),
            )
            for t in effective.teachers
        ]
        if effective.errors:
            logger.warning("Payroll %04d-%02d computed with %d skipped records", year, month, len(effective.errors))

        return PayrollSheet(year=year, month=month, rows=rows, summary=summarize(rows))

    @staticmethod
    def to_csv_rows(sheet: PayrollSheet) -> list[dict]:
        return [
            {
                "teacher_id": r.teacher_id,
                "teacher_name": r.teacher_name,
                "designation": r.designation,
                "base_salary": r.base_salary,
                "days_present": r.result.days_present,
                "days_absent": r.result.days_absent,
                "days_leave": r.result.days_leave,
                "bonus": r.result.bonus,
                "computed_salary": r.result.computed_salary,
                "deductions": r.result.deductions,
                "net_salary": r.result.net_salary,
            }
            for r in sheet.rows
        ]
