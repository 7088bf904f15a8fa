from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import RawAttendanceRecord
from .snapshot import RecordInput


class AttendanceRepository(Protocol):
    """Persistence contract for raw attendance marks.

    Writes are upserts keyed by (teacher_id, work_date); concurrent writers
    resolve as last-write-wins. Range reads may hand back plain rows
    (teacher_id/date/status); AttendanceSnapshot validates them.
    """

    def get_raw_attendance(
        self,
        *,
        teacher_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[RecordInput]:
        raise NotImplementedError

    def get_for_teacher_and_date(self, teacher_id: int, work_date: date) -> Optional[RawAttendanceRecord]:
        raise NotImplementedError

    def upsert(self, *, teacher_id: int, work_date: date, status: AttendanceStatus) -> None:
        raise NotImplementedError

    def delete(self, *, teacher_id: int, work_date: date) -> bool:
        raise NotImplementedError
