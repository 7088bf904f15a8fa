from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Teacher


class TeacherRepository(Protocol):
    def list_teachers(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        raise NotImplementedError

    def create_teacher(
        self,
        *,
        name: str,
        designation: str,
        base_salary: Decimal,
        join_date: Optional[date],
        contact: Optional[str],
    ) -> int:
        raise NotImplementedError

    def update_teacher(
        self,
        *,
        teacher_id: int,
        name: str,
        designation: str,
        base_salary: Decimal,
        join_date: Optional[date],
        contact: Optional[str],
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, teacher_id: int) -> bool:
        raise NotImplementedError
