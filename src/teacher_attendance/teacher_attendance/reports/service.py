from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from ..attendance.service import AttendanceService
from ..common.datetime_utils import month_bounds, shift_month
from ..core.constants import DEFAULT_RATE_DECIMALS
from ..core.enums import ReportPeriod
from .aggregation import fleet_stats, monthly_trend_point, teacher_stats, working_days
from .model import AttendanceReport, MonthlyTrendPoint
from .periods import period_range

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "teacher_id",
    "teacher_name",
    "total_working_days",
    "present_days",
    "absent_days",
    "late_days",
    "attendance_rate",
]


class AttendanceReportService:
    """Use case: attendance statistics over arbitrary date ranges."""

    def __init__(self, attendance: AttendanceService, *, exclude_holidays: bool = False):
        self._attendance = attendance
        self._exclude_holidays = bool(exclude_holidays)

    def _exclude(self, override: Optional[bool]) -> bool:
        return self._exclude_holidays if override is None else bool(override)

    def build_report(
        self,
        *,
        start: date,
        end: date,
        teacher_id: Optional[int] = None,
        exclude_holidays: Optional[bool] = None,
        ndigits: int = DEFAULT_RATE_DECIMALS,
    ) -> AttendanceReport:
        exclude = self._exclude(exclude_holidays)
        ids = [teacher_id] if teacher_id is not None else None
        effective = self._attendance.effective_range(start, end, teacher_ids=ids)
        working = working_days(start, end, effective.holidays, exclude_holidays=exclude)

        stats = [
            teacher_stats(t, effective.rows.get(t.teacher_id, []), working, ndigits=ndigits)
            for t in effective.teachers
        ]
        logger.debug("Attendance report %s..%s: %d teachers, %d working days", start, end, len(stats), len(working))

        return AttendanceReport(
            start=start,
            end=end,
            exclude_holidays=exclude,
            teachers=stats,
            fleet=fleet_stats(stats, len(working), ndigits=ndigits),
        )

    def build_period_report(
        self,
        period: Union[ReportPeriod, str],
        *,
        today: Optional[date] = None,
        exclude_holidays: Optional[bool] = None,
    ) -> AttendanceReport:
        start, end = period_range(period, today)
        return self.build_report(start=start, end=end, exclude_holidays=exclude_holidays)

    def monthly_trend(
        self,
        *,
        start: date,
        end: date,
        exclude_holidays: Optional[bool] = None,
    ) -> list[MonthlyTrendPoint]:
        """One point per calendar month touching [start, end], clipped to the range."""
        exclude = self._exclude(exclude_holidays)
        effective = self._attendance.effective_range(start, end)

        points: list[MonthlyTrendPoint] = []
        y, m = start.year, start.month
        while (y, m) <= (end.year, end.month):
            first, last = month_bounds(y, m)
            lo, hi = max(first, start), min(last, end)
            rows = {
                tid: [d for d in days if lo <= d.date <= hi]
                for tid, days in effective.rows.items()
            }
            points.append(monthly_trend_point(lo, hi, rows, effective.holidays, exclude_holidays=exclude))
            y, m = shift_month(y, m, 1)
        return points

    @staticmethod
    def to_csv_rows(report: AttendanceReport) -> list[dict]:
        return [
            {
                "teacher_id": s.teacher_id,
                "teacher_name": s.teacher_name,
                "total_working_days": s.total_working_days,
                "present_days": s.present_days,
                "absent_days": s.absent_days,
                "late_days": s.late_days,
                "attendance_rate": f"{s.attendance_rate}%",
            }
            for s in report.teachers
        ]
