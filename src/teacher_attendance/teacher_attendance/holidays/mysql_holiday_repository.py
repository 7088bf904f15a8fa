from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import HolidayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_holidays(self, *, start: Optional[date] = None, end: Optional[date] = None) -> Sequence[Holiday]:
        clauses: list[str] = []
        params: list[object] = []
        if start is not None:
            clauses.append("holiday_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("holiday_date <= %s")
            params.append(end)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT holiday_date, name, holiday_type
                FROM holidays
                {where}
                ORDER BY holiday_date ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                Holiday(date=r["holiday_date"], name=r["name"], type=HolidayType(r["holiday_type"]))
                for r in rows
            ]

    def upsert(self, *, holiday_date: date, name: str, holiday_type: HolidayType) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO holidays(holiday_date, name, holiday_type)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE name=VALUES(name), holiday_type=VALUES(holiday_type)
                """,
                (holiday_date, name, holiday_type.value),
            )

    def delete_by_date(self, holiday_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE holiday_date=%s", (holiday_date,))
            return cur.rowcount > 0
