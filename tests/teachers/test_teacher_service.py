from datetime import date
from decimal import Decimal

import pytest

from src.teacher_attendance.teacher_attendance.core.exceptions import NotFoundError, ValidationError
from src.teacher_attendance.teacher_attendance.teachers.service import TeacherService


def test_create_and_get(teachers_repo):
    svc = TeacherService(teachers_repo)
    tid = svc.create_teacher(name=" Chen ", designation="Art", base_salary="18000.50", join_date="2024-06-01")

    teacher = svc.get_teacher(tid)
    assert teacher.name == "Chen"
    assert teacher.base_salary == Decimal("18000.50")
    assert teacher.join_date == date(2024, 6, 1)
    assert teacher.contact is None


def test_create_rejects_negative_salary(teachers_repo):
    with pytest.raises(ValidationError):
        TeacherService(teachers_repo).create_teacher(name="X", base_salary=-1)


def test_update_changes_only_given_fields(teachers_repo):
    svc = TeacherService(teachers_repo)
    updated = svc.update_teacher(1, base_salary=32000)

    assert updated.base_salary == Decimal("32000")
    assert updated.name == "Asha"
    assert svc.get_teacher(1).base_salary == Decimal("32000")


def test_update_rejects_unknown_fields(teachers_repo):
    with pytest.raises(ValidationError):
        TeacherService(teachers_repo).update_teacher(1, salary=1)


def test_delete(teachers_repo):
    svc = TeacherService(teachers_repo)
    svc.delete_teacher(2)

    with pytest.raises(NotFoundError):
        svc.get_teacher(2)
    with pytest.raises(NotFoundError):
        svc.delete_teacher(2)
