from datetime import date

import pytest

from src.teacher_attendance.teacher_attendance.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.teacher_attendance.teacher_attendance.attendance.snapshot import AttendanceSnapshot
from src.teacher_attendance.teacher_attendance.core.enums import AttendanceStatus
from src.teacher_attendance.teacher_attendance.core.exceptions import ValidationError


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []

    def execute(self, sql, params=()):
        self.executed.append((sql, params))

    def fetchall(self):
        return list(self._rows)

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows):
        self.cur = FakeCursor(rows)

    def cursor(self, dictionary=False):
        return self.cur

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows):
        self.rows = rows

    def connect(self, *, with_database=True):
        return FakeConnection(self.rows)


ROWS = [
    {"teacher_id": 1, "work_date": date(2025, 1, 7), "status": "present"},
    {"teacher_id": 1, "work_date": date(2025, 1, 8), "status": "holiday"},
    {"teacher_id": 2, "work_date": date(2025, 1, 7), "status": "late"},
]


def test_bad_stored_status_is_reported_not_raised():
    repo = MySQLAttendanceRepository(FakeConnFactory(ROWS))

    snap = AttendanceSnapshot.from_records(repo.get_raw_attendance(start=date(2025, 1, 1), end=date(2025, 1, 31)))

    assert len(snap) == 2
    assert snap.status(2, date(2025, 1, 7)) == AttendanceStatus.LATE
    assert len(snap.errors) == 1


def test_bad_stored_status_raises_in_strict_mode():
    repo = MySQLAttendanceRepository(FakeConnFactory(ROWS))

    with pytest.raises(ValidationError):
        AttendanceSnapshot.from_records(repo.get_raw_attendance(), strict=True)


def test_single_lookup_is_typed():
    repo = MySQLAttendanceRepository(FakeConnFactory(ROWS[:1]))

    rec = repo.get_for_teacher_and_date(1, date(2025, 1, 7))

    assert rec.status == AttendanceStatus.PRESENT
    assert rec.date == date(2025, 1, 7)


def test_bad_rows_surface_on_effective_range(container, attendance_repo, monkeypatch):
    monkeypatch.setattr(attendance_repo, "get_raw_attendance", lambda **kwargs: ROWS)

    result = container.attendance_service.effective_range(date(2025, 1, 1), date(2025, 1, 31))

    assert len(result.errors) == 1
    assert result.rows[1][6].status == AttendanceStatus.PRESENT
    assert result.rows[2][6].status == AttendanceStatus.LATE
