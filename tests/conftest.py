from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from src.teacher_attendance.teacher_attendance.attendance.model import RawAttendanceRecord
from src.teacher_attendance.teacher_attendance.container import build_services
from src.teacher_attendance.teacher_attendance.core.enums import AttendanceStatus, HolidayType, Role
from src.teacher_attendance.teacher_attendance.holidays.model import Holiday
from src.teacher_attendance.teacher_attendance.teachers.model import Teacher
from src.teacher_attendance.teacher_attendance.users.model import User


class InMemoryTeachers:
    def __init__(self, teachers=()):
        self._by_id: dict[int, Teacher] = {t.teacher_id: t for t in teachers}
        self._id = max(self._by_id, default=0)

    def list_teachers(self):
        return [self._by_id[k] for k in sorted(self._by_id)]

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        return self._by_id.get(teacher_id)

    def create_teacher(self, *, name, designation, base_salary, join_date, contact) -> int:
        self._id += 1
        self._by_id[self._id] = Teacher(
            teacher_id=self._id,
            name=name,
            designation=designation,
            base_salary=base_salary,
            join_date=join_date,
            contact=contact,
        )
        return self._id

    def update_teacher(self, *, teacher_id, name, designation, base_salary, join_date, contact) -> bool:
        if teacher_id not in self._by_id:
            return False
        self._by_id[teacher_id] = Teacher(
            teacher_id=teacher_id,
            name=name,
            designation=designation,
            base_salary=base_salary,
            join_date=join_date,
            contact=contact,
        )
        return True

    def delete_by_id(self, teacher_id: int) -> bool:
        return self._by_id.pop(teacher_id, None) is not None


class InMemoryAttendance:
    def __init__(self):
        self._by_teacher_date: dict[tuple[int, date], RawAttendanceRecord] = {}

    def get_raw_attendance(self, *, teacher_id=None, start=None, end=None):
        out = []
        for (tid, d), rec in sorted(self._by_teacher_date.items()):
            if teacher_id is not None and tid != teacher_id:
                continue
            if start is not None and d < start:
                continue
            if end is not None and d > end:
                continue
            out.append(rec)
        return out

    def get_for_teacher_and_date(self, teacher_id: int, work_date: date) -> Optional[RawAttendanceRecord]:
        return self._by_teacher_date.get((teacher_id, work_date))

    def upsert(self, *, teacher_id: int, work_date: date, status: AttendanceStatus) -> None:
        self._by_teacher_date[(teacher_id, work_date)] = RawAttendanceRecord(teacher_id=teacher_id, date=work_date, status=status)

    def delete(self, *, teacher_id: int, work_date: date) -> bool:
        return self._by_teacher_date.pop((teacher_id, work_date), None) is not None


class InMemoryHolidays:
    def __init__(self, holidays=()):
        self._by_date: dict[date, Holiday] = {h.date: h for h in holidays}

    def list_holidays(self, *, start=None, end=None):
        return [
            h
            for d, h in sorted(self._by_date.items())
            if (start is None or d >= start) and (end is None or d <= end)
        ]

    def upsert(self, *, holiday_date: date, name: str, holiday_type: HolidayType) -> None:
        self._by_date[holiday_date] = Holiday(date=holiday_date, name=name, type=holiday_type)

    def delete_by_date(self, holiday_date: date) -> bool:
        return self._by_date.pop(holiday_date, None) is not None


class InMemoryUsers:
    def __init__(self, users=()):
        self._by_id: dict[int, User] = {u.user_id: u for u in users}
        self._id = max(self._by_id, default=0)

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.username == username), None)

    def create_user(self, *, name, username, password_hash, role, teacher_id) -> int:
        self._id += 1
        self._by_id[self._id] = User(
            user_id=self._id,
            name=name,
            username=username,
            password_hash=password_hash,
            role=Role(role),
            teacher_id=teacher_id,
        )
        return self._id

    def list_users(self):
        return [self._by_id[k] for k in sorted(self._by_id)]


@pytest.fixture
def teachers_repo():
    return InMemoryTeachers(
        [
            Teacher(teacher_id=1, name="Asha", designation="Math", base_salary=Decimal("30000")),
            Teacher(teacher_id=2, name="Bilal", designation="Science", base_salary=Decimal("24000")),
        ]
    )


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def holidays_repo():
    return InMemoryHolidays()


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def container(teachers_repo, attendance_repo, holidays_repo, users_repo):
    return build_services(
        users_repo=users_repo,
        teachers_repo=teachers_repo,
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
    )


@pytest.fixture
def mark(attendance_repo):
    """Seed raw marks directly: mark(teacher_id, status, *dates)."""

    def _mark(teacher_id: int, status: str, *days: date) -> None:
        for d in days:
            attendance_repo.upsert(teacher_id=teacher_id, work_date=d, status=AttendanceStatus(status))

    return _mark
