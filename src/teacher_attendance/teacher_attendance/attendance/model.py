from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class RawAttendanceRecord:
    """Domain entity: one persisted attendance mark.

    At most one exists per (teacher_id, date). A missing record means the
    day is unmarked; "unmarked" is never stored.
    """

    teacher_id: int
    date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class EffectiveDay:
    """Read-model: resolved status of one teacher on one calendar day."""

    teacher_id: int
    date: date
    status: AttendanceStatus
    raw_status: Optional[AttendanceStatus]
    is_sunday: bool
    is_holiday: bool

    @property
    def counts_as_present(self) -> bool:
        return self.status in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)

    def to_dict(self) -> dict:
        return {**asdict(self), "counts_as_present": self.counts_as_present}
