from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import HolidayType


@dataclass(frozen=True)
class Holiday:
    """A named date on which school is closed for every teacher."""

    date: date
    name: str
    type: HolidayType = HolidayType.FESTIVAL
