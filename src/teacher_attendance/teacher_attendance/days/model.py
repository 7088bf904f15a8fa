from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DayInfo:
    """One calendar day of a month, classified for the attendance rules."""

    date: date
    day_number: int
    is_weekend: bool
    is_sunday: bool

    @property
    def is_saturday(self) -> bool:
        return self.date.weekday() == 5
