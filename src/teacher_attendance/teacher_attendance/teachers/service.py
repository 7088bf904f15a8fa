from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import DateLike, coerce_date
from ..common.validators import require_non_empty, require_non_negative_amount
from ..core.exceptions import NotFoundError, ValidationError
from .model import Teacher
from .repository import TeacherRepository

logger = logging.getLogger(__name__)


class TeacherService:
    """Use case: manage teachers (admin)."""

    def __init__(self, teachers: TeacherRepository):
        self._teachers = teachers

    def list_teachers(self) -> list[Teacher]:
        return list(self._teachers.list_teachers())

    def get_teacher(self, teacher_id: int) -> Teacher:
        teacher = self._teachers.get_by_id(int(teacher_id))
        if not teacher:
            raise NotFoundError("Teacher not found")
        return teacher

    def create_teacher(
        self,
        *,
        name: str,
        designation: str = "",
        base_salary=0,
        join_date: Optional[DateLike] = None,
        contact: Optional[str] = None,
    ) -> int:
        name = require_non_empty(name, "Name")
        salary = require_non_negative_amount(base_salary, "Base salary")
        teacher_id = self._teachers.create_teacher(
            name=name,
            designation=(designation or "").strip(),
            base_salary=salary,
            join_date=coerce_date(join_date) if join_date else None,
            contact=(contact or "").strip() or None,
        )
        logger.info("Teacher created: id=%s name=%s", teacher_id, name)
        return teacher_id

    def update_teacher(self, teacher_id: int, **changes) -> Teacher:
        current = self.get_teacher(teacher_id)
        unknown = set(changes) - {"name", "designation", "base_salary", "join_date", "contact"}
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

        name = require_non_empty(changes.get("name", current.name), "Name")
        salary = require_non_negative_amount(changes.get("base_salary", current.base_salary), "Base salary")
        join_date = changes.get("join_date", current.join_date)
        updated = Teacher(
            teacher_id=current.teacher_id,
            name=name,
            designation=(changes.get("designation", current.designation) or "").strip(),
            base_salary=salary,
            join_date=coerce_date(join_date) if join_date else None,
            contact=changes.get("contact", current.contact),
        )

        if not self._teachers.update_teacher(
            teacher_id=updated.teacher_id,
            name=updated.name,
            designation=updated.designation,
            base_salary=updated.base_salary,
            join_date=updated.join_date,
            contact=updated.contact,
        ):
            raise ValidationError("Updating teacher failed")
        logger.info("Teacher updated: id=%s", updated.teacher_id)
        return updated

    def delete_teacher(self, teacher_id: int) -> None:
        self.get_teacher(teacher_id)
        if not self._teachers.delete_by_id(int(teacher_id)):
            raise ValidationError("Deleting teacher failed")
        logger.info("Teacher deleted: id=%s", teacher_id)
