from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Teacher:
    """Domain entity: a salaried teacher.

    base_salary is the monthly amount before attendance adjustments.
    """

    teacher_id: int
    name: str
    designation: str
    base_salary: Decimal
    join_date: Optional[date] = None
    contact: Optional[str] = None
