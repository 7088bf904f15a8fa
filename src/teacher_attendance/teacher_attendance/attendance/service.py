from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Union

from ..common.datetime_utils import DateLike, coerce_date, month_bounds
from ..common.numbers import safe_percentage
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..days.model import DayInfo
from ..days.service import days_in_month
from ..holidays.model import Holiday
from ..holidays.registry import HolidayRegistry
from ..holidays.repository import HolidayRepository
from ..teachers.model import Teacher
from ..teachers.repository import TeacherRepository
from .model import EffectiveDay, RawAttendanceRecord
from .repository import AttendanceRepository
from .resolver import StatusResolver, resolution_window
from .snapshot import AttendanceSnapshot, parse_status

logger = logging.getLogger(__name__)

# absent -> present -> late -> absent; an unmarked day starts at present.
TOGGLE_CYCLE = {
    AttendanceStatus.ABSENT: AttendanceStatus.PRESENT,
    AttendanceStatus.PRESENT: AttendanceStatus.LATE,
    AttendanceStatus.LATE: AttendanceStatus.ABSENT,
}


@dataclass(frozen=True)
class MonthGrid:
    """Read-model for the monthly attendance screen."""

    year: int
    month: int
    days: list[DayInfo]
    holidays: list[Holiday]
    rows: dict[int, list[EffectiveDay]]


@dataclass(frozen=True)
class MonthStats:
    total_working_days: int
    attendance_rate: int
    total_late: int


@dataclass(frozen=True)
class EffectiveRange:
    """Effective statuses for a set of teachers over [start, end]."""

    start: date
    end: date
    teachers: list[Teacher]
    holidays: HolidayRegistry
    rows: dict[int, list[EffectiveDay]]
    errors: tuple[ValidationError, ...] = ()


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        teachers: TeacherRepository,
        holidays: HolidayRepository,
        *,
        resolver: StatusResolver | None = None,
        strict: bool = False,
    ):
        self._attendance = attendance
        self._teachers = teachers
        self._holidays = holidays
        self._resolver = resolver or StatusResolver()
        self._strict = bool(strict)

    def _require_teacher(self, teacher_id: int) -> Teacher:
        teacher = self._teachers.get_by_id(int(teacher_id))
        if not teacher:
            raise NotFoundError("Teacher not found")
        return teacher

    def mark(self, teacher_id: int, work_date: DateLike, status: Union[AttendanceStatus, str]) -> RawAttendanceRecord:
        teacher = self._require_teacher(teacher_id)
        d = coerce_date(work_date)
        s = parse_status(status)

        self._attendance.upsert(teacher_id=teacher.teacher_id, work_date=d, status=s)
        logger.info("Attendance marked: teacher=%s date=%s status=%s", teacher.teacher_id, d, s.value)
        return RawAttendanceRecord(teacher_id=teacher.teacher_id, date=d, status=s)

    def toggle(self, teacher_id: int, work_date: DateLike) -> RawAttendanceRecord:
        teacher = self._require_teacher(teacher_id)
        d = coerce_date(work_date)

        existing = self._attendance.get_for_teacher_and_date(teacher.teacher_id, d)
        nxt = TOGGLE_CYCLE[existing.status] if existing else AttendanceStatus.PRESENT
        return self.mark(teacher.teacher_id, d, nxt)

    def mark_all_for_day(self, work_date: DateLike, status: Union[AttendanceStatus, str]) -> int:
        d = coerce_date(work_date)
        s = parse_status(status)

        count = 0
        for teacher in self._teachers.list_teachers():
            self._attendance.upsert(teacher_id=teacher.teacher_id, work_date=d, status=s)
            count += 1
        logger.info("Attendance marked for all teachers: date=%s status=%s count=%s", d, s.value, count)
        return count

    def clear(self, teacher_id: int, work_date: DateLike) -> None:
        d = coerce_date(work_date)
        if not self._attendance.delete(teacher_id=int(teacher_id), work_date=d):
            raise NotFoundError(f"No attendance mark for teacher {teacher_id} on {d}")
        logger.info("Attendance cleared: teacher=%s date=%s", teacher_id, d)

    def get_raw(self, teacher_id: int, work_date: DateLike) -> Optional[RawAttendanceRecord]:
        return self._attendance.get_for_teacher_and_date(int(teacher_id), coerce_date(work_date))

    def load_snapshot(self, start: date, end: date, *, teacher_id: Optional[int] = None) -> AttendanceSnapshot:
        lo, hi = resolution_window(start, end)
        records = self._attendance.get_raw_attendance(teacher_id=teacher_id, start=lo, end=hi)
        return AttendanceSnapshot.from_records(records, strict=self._strict)

    def effective_range(
        self,
        start: date,
        end: date,
        *,
        teacher_ids: Optional[Iterable[int]] = None,
    ) -> EffectiveRange:
        if start > end:
            raise ValidationError(f"Start date {start} is after end date {end}")

        teachers = list(self._teachers.list_teachers())
        if teacher_ids is not None:
            wanted = {int(t) for t in teacher_ids}
            teachers = [t for t in teachers if t.teacher_id in wanted]
            missing = wanted - {t.teacher_id for t in teachers}
            if missing:
                raise NotFoundError(f"Teacher not found: {', '.join(map(str, sorted(missing)))}")

        only = teachers[0].teacher_id if len(teachers) == 1 else None
        snapshot = self.load_snapshot(start, end, teacher_id=only)
        lo, hi = resolution_window(start, end)
        registry = HolidayRegistry(self._holidays.list_holidays(start=lo, end=hi))

        rows = {
            t.teacher_id: self._resolver.resolve_range(t.teacher_id, start, end, snapshot, registry)
            for t in teachers
        }
        return EffectiveRange(
            start=start,
            end=end,
            teachers=teachers,
            holidays=registry,
            rows=rows,
            errors=snapshot.errors,
        )

    def effective_month(self, year: int, month: int, *, teacher_id: Optional[int] = None) -> MonthGrid:
        start, end = month_bounds(year, month)
        ids = [teacher_id] if teacher_id is not None else None
        result = self.effective_range(start, end, teacher_ids=ids)
        return MonthGrid(
            year=year,
            month=month,
            days=days_in_month(year, month),
            holidays=result.holidays.in_range(start, end),
            rows=result.rows,
        )

    def month_stats(self, year: int, month: int) -> MonthStats:
        """Fleet figures for the month screen: Sundays are not working days."""
        grid = self.effective_month(year, month)
        working = [d for d in grid.days if not d.is_sunday]
        working_dates = {d.date for d in working}

        present = 0
        late = 0
        for row in grid.rows.values():
            for day in row:
                if day.date not in working_dates:
                    continue
                if day.counts_as_present:
                    present += 1
                if day.status == AttendanceStatus.LATE:
                    late += 1

        possible = len(grid.rows) * len(working)
        rate = safe_percentage(present, possible, ndigits=0)
        return MonthStats(total_working_days=len(working), attendance_rate=int(rate), total_late=late)
