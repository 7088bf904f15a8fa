from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class SalaryResult:
    """Monthly salary figures for one teacher.

    computed_salary and deductions are kept apart; net pay is
    computed_salary - deductions and is never folded in here.
    """

    teacher_id: int
    days_present: int
    days_absent: int
    days_leave: int
    bonus: int
    computed_salary: int
    deductions: int

    @property
    def net_salary(self) -> int:
        return self.computed_salary - self.deductions

    def to_dict(self) -> dict:
        return {**asdict(self), "net_salary": self.net_salary}


@dataclass(frozen=True)
class PayrollRow:
    teacher_id: int
    teacher_name: str
    designation: str
    base_salary: Decimal
    result: SalaryResult


@dataclass(frozen=True)
class PayrollSummary:
    total_base_salary: Decimal
    total_computed_salary: int
    total_deductions: int
    total_net_salary: int
    average_net_salary: int
    highest_paid: Optional[str]
    lowest_paid: Optional[str]


@dataclass(frozen=True)
class PayrollSheet:
    year: int
    month: int
    rows: list[PayrollRow]
    summary: PayrollSummary
