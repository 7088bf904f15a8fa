from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Union

from ...attendance.model import EffectiveDay
from ...core.enums import AttendanceStatus
from ...teachers.model import Teacher
from ..model import SalaryResult

StatusInput = Union[EffectiveDay, AttendanceStatus]


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, teacher: Teacher, statuses: Iterable[StatusInput]) -> SalaryResult:
        raise NotImplementedError
