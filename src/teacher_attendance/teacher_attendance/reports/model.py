from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

Rate = Union[int, float]


@dataclass(frozen=True)
class TeacherAttendanceStats:
    teacher_id: int
    teacher_name: str
    total_working_days: int
    present_days: int
    absent_days: int
    late_days: int
    attendance_rate: Rate


@dataclass(frozen=True)
class FleetAttendanceStats:
    total_teachers: int
    total_working_days: int
    total_present: int
    total_absent: int
    total_late: int
    average_attendance: Rate
    overall_rate: Rate


@dataclass(frozen=True)
class MonthlyTrendPoint:
    month: str
    label: str
    attendance_rate: Rate
    total_present: int
    total_absent: int


@dataclass(frozen=True)
class AttendanceReport:
    start: date
    end: date
    exclude_holidays: bool
    teachers: list[TeacherAttendanceStats]
    fleet: FleetAttendanceStats
