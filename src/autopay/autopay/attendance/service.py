from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import as_utc, now_utc
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import ClockAction
from ..core.exceptions import AlreadyRecordedError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, ClockEventResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Daily clock-in/clock-out ledger.

    Per (employee, date): no record -> check-in -> check-out -> rejected.
    """

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def record_clock_event(self, employee_id: str, *, now: Optional[datetime] = None) -> ClockEventResult:
        now = as_utc(now or now_utc())
        today = now.date()

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")

        existing = self._attendance.get_for_employee_and_date(employee_id, today)
        if existing is None:
            record = self._attendance.upsert_record(employee_id=employee_id, work_date=today, check_in=now)
            logger.info("[attendance] check-in employee_id=%s date=%s", employee_id, today)
            return ClockEventResult(record=record, action=ClockAction.CHECK_IN)

        if existing.is_complete:
            raise AlreadyRecordedError("Your attendance for today has already been fully recorded.")

        record = self._attendance.upsert_record(
            employee_id=employee_id,
            work_date=today,
            check_in=existing.check_in,
            check_out=now,
        )
        logger.info("[attendance] check-out employee_id=%s date=%s", employee_id, today)
        return ClockEventResult(record=record, action=ClockAction.CHECK_OUT)

    def get_today_record(self, employee_id: str, today: date) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(employee_id, today)

    def list_records(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(employee_id)

    def get_history(self, employee_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[AttendanceRecord]:
        if int(limit) < 1:
            raise ValidationError("limit must be a positive number")
        rows = sorted(self._attendance.list_for_employee(employee_id), key=lambda r: r.work_date, reverse=True)
        return rows[: int(limit)]

    def describe(self, record: AttendanceRecord) -> dict:
        """Display row for one record: timestamps plus worked duration once complete."""
        out = record.to_dict()
        if record.check_out is None:
            out.update({"state": "open", "workedHours": None, "workedLabel": None})
            return out

        seconds = max((record.check_out - record.check_in).total_seconds(), 0)
        hours, rem = divmod(int(seconds), 3600)
        out.update(
            {
                "state": "complete",
                "workedHours": round(seconds / 3600, 2),
                "workedLabel": f"{hours}h {rem // 60}m",
            }
        )
        return out
