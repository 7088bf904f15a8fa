from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, Mapping, Optional, Union

from ..common.datetime_utils import coerce_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import RawAttendanceRecord

logger = logging.getLogger(__name__)

RecordInput = Union[RawAttendanceRecord, Mapping[str, Any]]


def parse_status(value: Union[AttendanceStatus, str]) -> AttendanceStatus:
    try:
        return AttendanceStatus(str(value.value if isinstance(value, AttendanceStatus) else value).strip().lower())
    except ValueError as exc:
        raise ValidationError(f"Invalid attendance status: {value!r}") from exc


def normalize_record(item: RecordInput) -> RawAttendanceRecord:
    """Turn a record or a plain row (teacher_id/date/status) into a typed record."""
    if isinstance(item, RawAttendanceRecord):
        teacher_id, raw_date, raw_status = item.teacher_id, item.date, item.status
    elif not isinstance(item, Mapping):
        raise ValidationError(f"Attendance record must be a mapping, got {type(item).__name__}")
    else:
        teacher_id = item.get("teacher_id", item.get("teacherId"))
        raw_date = item.get("date", item.get("work_date"))
        raw_status = item.get("status")

    try:
        tid = int(teacher_id)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid teacher id: {teacher_id!r}") from exc

    if raw_date is None:
        raise ValidationError("Attendance record has no date")
    return RawAttendanceRecord(teacher_id=tid, date=coerce_date(raw_date), status=parse_status(raw_status))


@dataclass(frozen=True)
class AttendanceSnapshot:
    """Immutable (teacher_id, date) -> raw status lookup for one computation pass."""

    statuses: Mapping[tuple[int, date], AttendanceStatus] = field(default_factory=dict)
    errors: tuple[ValidationError, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[RecordInput], *, strict: bool = False) -> "AttendanceSnapshot":
        """Build a snapshot; for duplicates the last supplied record wins.

        In strict mode the first malformed record raises ValidationError.
        Otherwise it is left out, logged and kept on `errors`.
        """
        statuses: dict[tuple[int, date], AttendanceStatus] = {}
        errors: list[ValidationError] = []

        for item in records:
            try:
                rec = normalize_record(item)
            except ValidationError as exc:
                if strict:
                    raise
                logger.warning("Skipping malformed attendance record %r: %s", item, exc)
                errors.append(exc)
                continue
            statuses[(rec.teacher_id, rec.date)] = rec.status

        return cls(statuses=statuses, errors=tuple(errors))

    def status(self, teacher_id: int, d: date) -> Optional[AttendanceStatus]:
        return self.statuses.get((int(teacher_id), d))

    def teacher_ids(self) -> set[int]:
        return {tid for tid, _ in self.statuses}

    def __len__(self) -> int:
        return len(self.statuses)
