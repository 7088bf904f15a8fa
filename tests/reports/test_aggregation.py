from datetime import date
from decimal import Decimal

from src.teacher_attendance.teacher_attendance.attendance.model import EffectiveDay
from src.teacher_attendance.teacher_attendance.common.numbers import round_to_int, safe_percentage
from src.teacher_attendance.teacher_attendance.core.enums import AttendanceStatus
from src.teacher_attendance.teacher_attendance.holidays.model import Holiday
from src.teacher_attendance.teacher_attendance.holidays.registry import HolidayRegistry
from src.teacher_attendance.teacher_attendance.reports.aggregation import fleet_stats, teacher_stats, working_days
from src.teacher_attendance.teacher_attendance.teachers.model import Teacher

TEACHER = Teacher(teacher_id=1, name="A", designation="", base_salary=Decimal("0"))


def eff(d, status):
    return EffectiveDay(teacher_id=1, date=d, status=status, raw_status=status, is_sunday=False, is_holiday=False)


def test_working_days_skip_sundays():
    days = working_days(date(2025, 1, 1), date(2025, 1, 31), exclude_holidays=False)
    assert len(days) == 27
    assert date(2025, 1, 5) not in days


def test_holidays_excluded_only_when_asked():
    regs = HolidayRegistry([Holiday(date=date(2025, 1, 8), name="X")])

    assert date(2025, 1, 8) in working_days(date(2025, 1, 6), date(2025, 1, 11), regs, exclude_holidays=False)
    assert date(2025, 1, 8) not in working_days(date(2025, 1, 6), date(2025, 1, 11), regs, exclude_holidays=True)


def test_zero_working_days_gives_zero_rate():
    sunday = date(2025, 1, 5)
    working = working_days(sunday, sunday, exclude_holidays=False)

    stats = teacher_stats(TEACHER, [eff(sunday, AttendanceStatus.PRESENT)], working)

    assert stats.total_working_days == 0
    assert stats.attendance_rate == 0
    assert fleet_stats([stats], 0).overall_rate == 0


def test_teacher_stats_counts_late_as_present():
    days = [
        eff(date(2025, 1, 6), AttendanceStatus.PRESENT),
        eff(date(2025, 1, 7), AttendanceStatus.LATE),
        eff(date(2025, 1, 8), AttendanceStatus.ABSENT),
    ]
    stats = teacher_stats(TEACHER, days, [d.date for d in days])

    assert (stats.present_days, stats.absent_days, stats.late_days) == (2, 1, 1)
    assert stats.attendance_rate == 66.67


def test_fleet_of_nobody():
    fleet = fleet_stats([], 20)
    assert fleet.total_teachers == 0
    assert fleet.average_attendance == 0
    assert fleet.overall_rate == 0


def test_percentages_round_half_up():
    assert safe_percentage(1, 8, ndigits=0) == 13  # 12.5
    assert safe_percentage(1, 3) == 33.33
    assert safe_percentage(5, 0) == 0
    assert round_to_int(Decimal("2.5")) == 3
