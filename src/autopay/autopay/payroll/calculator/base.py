from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable

from ...attendance.model import AttendanceRecord
from ..model import PayrollFigures


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def worked_minutes(self, record: AttendanceRecord) -> float:
        raise NotImplementedError

    @abstractmethod
    def calculate(self, *, monthly_salary: float, records: Iterable[AttendanceRecord], reference: date) -> PayrollFigures:
        raise NotImplementedError
