from datetime import date

import pytest

from src.teacher_attendance.teacher_attendance.attendance.model import RawAttendanceRecord
from src.teacher_attendance.teacher_attendance.attendance.resolver import StatusResolver, resolution_window
from src.teacher_attendance.teacher_attendance.attendance.snapshot import AttendanceSnapshot
from src.teacher_attendance.teacher_attendance.core.enums import AttendanceStatus
from src.teacher_attendance.teacher_attendance.core.exceptions import ValidationError
from src.teacher_attendance.teacher_attendance.holidays.model import Holiday
from src.teacher_attendance.teacher_attendance.holidays.registry import HolidayRegistry

A = AttendanceStatus.ABSENT
P = AttendanceStatus.PRESENT
L = AttendanceStatus.LATE

TUE = date(2025, 1, 7)
WED = date(2025, 1, 8)
THU = date(2025, 1, 9)
SAT = date(2025, 1, 11)
SUN = date(2025, 1, 12)
MON = date(2025, 1, 13)


def snap(*marks):
    return AttendanceSnapshot.from_records(RawAttendanceRecord(teacher_id=1, date=d, status=s) for d, s in marks)


def holidays(*days):
    return HolidayRegistry(Holiday(date=d, name="Holiday") for d in days)


@pytest.fixture
def resolver():
    return StatusResolver()


def test_unmarked_sunday_is_present(resolver):
    assert resolver.resolve(1, SUN, snap(), holidays()) == P


def test_unmarked_weekday_is_absent(resolver):
    assert resolver.resolve(1, TUE, snap(), holidays()) == A


def test_raw_mark_is_kept_on_ordinary_day(resolver):
    assert resolver.resolve(1, TUE, snap((TUE, L)), holidays()) == L
    assert resolver.resolve(1, SUN, snap((SUN, A)), holidays()) == A


def test_unmarked_holiday_is_present(resolver):
    assert resolver.resolve(1, WED, snap(), holidays(WED)) == P


def test_holiday_overrides_raw_absent(resolver):
    assert resolver.resolve(1, WED, snap((WED, A)), holidays(WED)) == P


def test_holiday_keeps_raw_late(resolver):
    assert resolver.resolve(1, WED, snap((WED, L)), holidays(WED)) == L


def test_holiday_bracketed_by_absence_is_absent(resolver):
    marks = snap((TUE, A), (THU, A))
    assert resolver.resolve(1, WED, marks, holidays(WED)) == A


def test_holiday_with_one_side_absent_is_present(resolver):
    marks = snap((TUE, A), (THU, L))
    assert resolver.resolve(1, WED, marks, holidays(WED)) == P


def test_bracket_uses_raw_neighbours_not_resolved_ones(resolver):
    # Neighbours are themselves holidays that resolve to present, but their raw status is absent.
    marks = snap((TUE, A), (THU, A))
    assert resolver.resolve(1, WED, marks, holidays(TUE, WED, THU)) == A


def test_unmarked_neighbour_does_not_bracket(resolver):
    assert resolver.resolve(1, WED, snap((TUE, A)), holidays(WED)) == P


def test_sunday_bracketed_by_saturday_and_monday_absence(resolver):
    marks = snap((SAT, A), (MON, A))
    assert resolver.resolve(1, SUN, marks, holidays()) == A


def test_sunday_bracket_needs_both_sides(resolver):
    assert resolver.resolve(1, SUN, snap((SAT, A), (MON, P)), holidays()) == P
    assert resolver.resolve(1, SUN, snap((SAT, L), (MON, A)), holidays()) == P


def test_marked_sunday_ignores_bracket(resolver):
    marks = snap((SAT, A), (SUN, P), (MON, A))
    assert resolver.resolve(1, SUN, marks, holidays()) == P


def test_sunday_holiday_follows_sunday_rules(resolver):
    assert resolver.resolve(1, SUN, snap(), holidays(SUN)) == P
    assert resolver.resolve(1, SUN, snap((SAT, A), (MON, A)), holidays(SUN)) == A


def test_sunday_bracket_crosses_month_boundary(resolver):
    # 2025-05-31 is a Saturday, 2025-06-01 a Sunday.
    marks = snap((date(2025, 5, 31), A), (date(2025, 6, 2), A))
    assert resolver.resolve(1, date(2025, 6, 1), marks, holidays()) == A


def test_resolution_is_idempotent(resolver):
    marks = snap((TUE, A), (THU, A), (SAT, A), (MON, A))
    regs = holidays(WED)
    first = resolver.resolve_range(1, TUE, MON, marks, regs)
    second = resolver.resolve_range(1, TUE, MON, marks, regs)
    assert first == second


def test_other_teachers_marks_do_not_leak(resolver):
    marks = AttendanceSnapshot.from_records(
        [
            RawAttendanceRecord(teacher_id=2, date=SAT, status=A),
            RawAttendanceRecord(teacher_id=2, date=MON, status=A),
        ]
    )
    assert resolver.resolve(1, SUN, marks, holidays()) == P
    assert resolver.resolve(2, SUN, marks, holidays()) == A


def test_resolve_month_returns_every_day_with_raw_and_flags(resolver):
    marks = snap((TUE, L))
    days = resolver.resolve_month(1, 2025, 1, marks, holidays(WED))

    assert len(days) == 31
    tue = days[TUE.day - 1]
    wed = days[WED.day - 1]
    assert tue.status == L and tue.raw_status == L and tue.counts_as_present
    assert wed.is_holiday and wed.raw_status is None and wed.status == P
    assert days[SUN.day - 1].is_sunday


def test_resolution_window_pads_one_day_each_side():
    assert resolution_window(date(2025, 6, 1), date(2025, 6, 30)) == (date(2025, 5, 31), date(2025, 7, 1))


def test_window_at_the_end_of_the_calendar_is_rejected():
    with pytest.raises(ValidationError):
        resolution_window(date(9999, 12, 1), date(9999, 12, 31))
    with pytest.raises(ValidationError):
        resolution_window(date(1, 1, 1), date(1, 1, 31))


def test_resolving_the_last_calendar_day_is_rejected(resolver):
    with pytest.raises(ValidationError):
        resolver.resolve(1, date(9999, 12, 31), snap(), holidays())
