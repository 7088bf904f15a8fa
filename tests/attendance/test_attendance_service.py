from datetime import date

import pytest

from src.teacher_attendance.teacher_attendance.core.enums import AttendanceStatus
from src.teacher_attendance.teacher_attendance.core.exceptions import NotFoundError, ValidationError
from src.teacher_attendance.teacher_attendance.days.service import days_in_month


def test_mark_is_upsert(container, attendance_repo):
    svc = container.attendance_service
    svc.mark(1, "2025-01-07", "absent")
    rec = svc.mark(1, date(2025, 1, 7), AttendanceStatus.LATE)

    assert rec.status == AttendanceStatus.LATE
    assert len(attendance_repo.get_raw_attendance(teacher_id=1)) == 1
    assert svc.get_raw(1, "2025-01-07").status == AttendanceStatus.LATE


def test_mark_unknown_teacher_raises(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.mark(99, "2025-01-07", "present")


def test_mark_rejects_bad_date_and_status(container):
    with pytest.raises(ValidationError):
        container.attendance_service.mark(1, "07/01/2025", "present")
    with pytest.raises(ValidationError):
        container.attendance_service.mark(1, "2025-01-07", "holiday")


def test_toggle_cycles_from_unmarked(container):
    svc = container.attendance_service
    seen = [svc.toggle(1, "2025-01-07").status for _ in range(4)]
    assert seen == [
        AttendanceStatus.PRESENT,
        AttendanceStatus.LATE,
        AttendanceStatus.ABSENT,
        AttendanceStatus.PRESENT,
    ]


def test_mark_all_for_day(container):
    count = container.attendance_service.mark_all_for_day("2025-01-07", "present")
    assert count == 2
    assert container.attendance_service.get_raw(2, "2025-01-07").status == AttendanceStatus.PRESENT


def test_clear_returns_day_to_unmarked(container):
    svc = container.attendance_service
    svc.mark(1, "2025-01-07", "present")
    svc.clear(1, "2025-01-07")

    assert svc.get_raw(1, "2025-01-07") is None
    with pytest.raises(NotFoundError):
        svc.clear(1, "2025-01-07")


def test_effective_month_uses_holidays_and_neighbouring_months(container, mark):
    container.holiday_service.add_holiday(holiday_date="2025-06-04", name="Eid")
    mark(1, "absent", date(2025, 5, 31), date(2025, 6, 2))

    grid = container.attendance_service.effective_month(2025, 6, teacher_id=1)

    assert list(grid.rows) == [1]
    row = grid.rows[1]
    assert len(row) == len(grid.days) == 30
    assert row[0].status == AttendanceStatus.ABSENT  # Sunday bracketed by 31 May and 2 June
    assert row[3].is_holiday and row[3].status == AttendanceStatus.PRESENT
    assert [h.name for h in grid.holidays] == ["Eid"]


def test_effective_range_unknown_teacher(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.effective_range(date(2025, 1, 1), date(2025, 1, 31), teacher_ids=[1, 42])


def test_effective_range_rejects_reversed_range(container):
    with pytest.raises(ValidationError):
        container.attendance_service.effective_range(date(2025, 2, 1), date(2025, 1, 1))


def test_month_stats(container, mark):
    working = [d.date for d in days_in_month(2025, 2) if not d.is_sunday]
    mark(1, "present", *working)
    mark(1, "late", working[0], working[1])

    stats = container.attendance_service.month_stats(2025, 2)

    assert stats.total_working_days == 24
    assert stats.attendance_rate == 50
    assert stats.total_late == 2
