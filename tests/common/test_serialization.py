from dataclasses import dataclass
from datetime import date

from src.teacher_attendance.teacher_attendance.attendance.model import EffectiveDay
from src.teacher_attendance.teacher_attendance.common.serialization import to_jsonable
from src.teacher_attendance.teacher_attendance.core.enums import AttendanceStatus
from src.teacher_attendance.teacher_attendance.payroll.model import SalaryResult


@dataclass(frozen=True)
class Window:
    start: date

    @property
    def net_salary(self) -> int:
        return 1


def test_salary_result_carries_net_salary():
    result = SalaryResult(
        teacher_id=1,
        days_present=29,
        days_absent=1,
        days_leave=1,
        bonus=0,
        computed_salary=30000,
        deductions=1000,
    )
    assert to_jsonable(result)["net_salary"] == 29000


def test_effective_day_carries_counts_as_present():
    day = EffectiveDay(
        teacher_id=1,
        date=date(2025, 1, 7),
        status=AttendanceStatus.LATE,
        raw_status=None,
        is_sunday=False,
        is_holiday=False,
    )
    out = to_jsonable(day)
    assert out["date"] == "2025-01-07"
    assert out["status"] == "late"
    assert out["raw_status"] is None
    assert out["counts_as_present"] is True


def test_plain_dataclass_serializes_fields_only():
    assert to_jsonable(Window(start=date(2025, 1, 1))) == {"start": "2025-01-01"}
