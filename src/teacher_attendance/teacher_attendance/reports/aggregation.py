"""Pure roll-ups of effective statuses into attendance statistics.

Working days always exclude Sundays. Whether holidays are excluded too is
decided by the caller (`exclude_holidays`); report variants disagree on it.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import EffectiveDay
from ..common.numbers import round_half_up, safe_percentage
from ..core.constants import DEFAULT_RATE_DECIMALS
from ..core.enums import AttendanceStatus
from ..days.service import iter_days
from ..holidays.registry import HolidayRegistry
from ..teachers.model import Teacher
from .model import FleetAttendanceStats, MonthlyTrendPoint, TeacherAttendanceStats


def working_days(
    start: date,
    end: date,
    holidays: Optional[HolidayRegistry] = None,
    *,
    exclude_holidays: bool,
) -> list[date]:
    out = []
    for d in iter_days(start, end):
        if d.is_sunday:
            continue
        if exclude_holidays and holidays is not None and holidays.is_holiday(d.date):
            continue
        out.append(d.date)
    return out


def teacher_stats(
    teacher: Teacher,
    days: Iterable[EffectiveDay],
    working: Sequence[date],
    *,
    ndigits: int = DEFAULT_RATE_DECIMALS,
) -> TeacherAttendanceStats:
    counted = set(working)
    present = absent = late = 0
    for d in days:
        if d.date not in counted:
            continue
        if d.status == AttendanceStatus.ABSENT:
            absent += 1
        else:
            present += 1
            if d.status == AttendanceStatus.LATE:
                late += 1

    return TeacherAttendanceStats(
        teacher_id=teacher.teacher_id,
        teacher_name=teacher.name,
        total_working_days=len(counted),
        present_days=present,
        absent_days=absent,
        late_days=late,
        attendance_rate=safe_percentage(present, len(counted), ndigits=ndigits),
    )


def fleet_stats(
    stats: Sequence[TeacherAttendanceStats],
    total_working_days: int,
    *,
    ndigits: int = DEFAULT_RATE_DECIMALS,
) -> FleetAttendanceStats:
    total_present = sum(s.present_days for s in stats)
    if stats:
        mean = sum((Decimal(str(s.attendance_rate)) for s in stats), Decimal(0)) / len(stats)
        average = round_half_up(mean, ndigits)
        average_rate = int(average) if ndigits == 0 else float(average)
    else:
        average_rate = 0

    return FleetAttendanceStats(
        total_teachers=len(stats),
        total_working_days=total_working_days,
        total_present=total_present,
        total_absent=sum(s.absent_days for s in stats),
        total_late=sum(s.late_days for s in stats),
        average_attendance=average_rate,
        overall_rate=safe_percentage(total_present, len(stats) * total_working_days, ndigits=ndigits),
    )


def monthly_trend_point(
    month_start: date,
    month_end: date,
    rows: Mapping[int, Sequence[EffectiveDay]],
    holidays: Optional[HolidayRegistry],
    *,
    exclude_holidays: bool,
    ndigits: int = DEFAULT_RATE_DECIMALS,
) -> MonthlyTrendPoint:
    counted = set(working_days(month_start, month_end, holidays, exclude_holidays=exclude_holidays))
    present = absent = 0
    for days in rows.values():
        for d in days:
            if d.date not in counted:
                continue
            if d.counts_as_present:
                present += 1
            else:
                absent += 1

    return MonthlyTrendPoint(
        month=month_start.strftime("%Y-%m"),
        label=month_start.strftime("%b"),
        attendance_rate=safe_percentage(present, len(rows) * len(counted), ndigits=ndigits),
        total_present=present,
        total_absent=absent,
    )
