from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Teacher
from .repository import TeacherRepository


def _to_teacher(r: dict) -> Teacher:
    return Teacher(
        teacher_id=int(r["teacher_id"]),
        name=r["name"],
        designation=r.get("designation") or "",
        base_salary=Decimal(str(r.get("base_salary") or 0)),
        join_date=r.get("join_date"),
        contact=r.get("contact"),
    )


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_teachers(self) -> Sequence[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT teacher_id, name, designation, base_salary, join_date, contact
                FROM teachers
                ORDER BY name ASC, teacher_id ASC
                """
            )
            return [_to_teacher(r) for r in fetchall(cur)]

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT teacher_id, name, designation, base_salary, join_date, contact
                FROM teachers
                WHERE teacher_id=%s
                """,
                (int(teacher_id),),
            )
            r = fetchone(cur)
            return _to_teacher(r) if r else None

    def create_teacher(
        self,
        *,
        name: str,
        designation: str,
        base_salary: Decimal,
        join_date: Optional[date],
        contact: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO teachers(name, designation, base_salary, join_date, contact)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, designation, base_salary, join_date, contact),
            )
            return int(cur.lastrowid)

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE teachers
                SET name=%s, designation=%s, base_salary=%s, join_date=%s, contact=%s
                WHERE teacher_id=%s
                """,
                (name, designation, base_salary, join_date, contact, int(teacher_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, teacher_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM teachers WHERE teacher_id=%s", (int(teacher_id),))
            return cur.rowcount > 0
