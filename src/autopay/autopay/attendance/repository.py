from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        """All records of the employee, oldest date first."""

        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert_record(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in: datetime,
        check_out: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Atomic keyed upsert on (employee_id, work_date).

        On conflict an existing check-in is kept and an existing check-out is
        never overwritten; a missing check-out is filled from `check_out`.
        """

        raise NotImplementedError
