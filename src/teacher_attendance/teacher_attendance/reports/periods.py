from __future__ import annotations

from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import month_bounds, shift_month, today_local
from ..core.enums import ReportPeriod
from ..core.exceptions import ValidationError


def period_range(period: Union[ReportPeriod, str], today: Optional[date] = None) -> tuple[date, date]:
    """Date range for a preset period, relative to `today`."""
    try:
        p = ReportPeriod(period)
    except ValueError as exc:
        raise ValidationError(f"Unknown report period: {period!r}") from exc

    today = today or today_local()
    y, m = today.year, today.month

    if p == ReportPeriod.CURRENT_MONTH:
        return month_bounds(y, m)
    if p == ReportPeriod.LAST_MONTH:
        return month_bounds(*shift_month(y, m, -1))
    if p == ReportPeriod.LAST_3_MONTHS:
        start, _ = month_bounds(*shift_month(y, m, -2))
        _, end = month_bounds(y, m)
        return start, end
    return date(y, 1, 1), date(y, 12, 31)
