from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import RawAttendanceRecord
from .repository import AttendanceRepository
from .snapshot import RecordInput, normalize_record


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_raw_attendance(
        self,
        *,
        teacher_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[RecordInput]:
        clauses: list[str] = []
        params: list[object] = []

        if teacher_id is not None:
            clauses.append("teacher_id=%s")
            params.append(int(teacher_id))
        if start is not None:
            clauses.append("work_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("work_date <= %s")
            params.append(end)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT teacher_id, work_date, status
                FROM attendance_records
                {where}
                ORDER BY work_date ASC, teacher_id ASC
                """,
                tuple(params),
            )
            # Rows stay untyped; the snapshot validates them and reports bad ones.
            return [
                {"teacher_id": r["teacher_id"], "date": r["work_date"], "status": r["status"]}
                for r in fetchall(cur)
            ]

    def get_for_teacher_and_date(self, teacher_id: int, work_date: date) -> Optional[RawAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT teacher_id, work_date, status
                FROM attendance_records
                WHERE teacher_id=%s AND work_date=%s
                """,
                (int(teacher_id), work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return normalize_record({"teacher_id": r["teacher_id"], "date": r["work_date"], "status": r["status"]})

    def upsert(self, *, teacher_id: int, work_date: date, status: AttendanceStatus) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(teacher_id, work_date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), updated_at=CURRENT_TIMESTAMP
                """,
                (int(teacher_id), work_date, status.value),
            )

    def delete(self, *, teacher_id: int, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance_records WHERE teacher_id=%s AND work_date=%s",
                (int(teacher_id), work_date),
            )
            return cur.rowcount > 0
