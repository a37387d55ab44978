from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.memory_store import MemoryStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with self._store.lock:
            items = [r for (emp, _), r in self._store.attendance.items() if emp == employee_id]
        items.sort(key=lambda r: r.work_date)
        return items

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with self._store.lock:
            return self._store.attendance.get((employee_id, work_date))

    def upsert_record(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in: datetime,
        check_out: Optional[datetime] = None,
    ) -> AttendanceRecord:
        key = (employee_id, work_date)
        with self._store.lock:
            existing = self._store.attendance.get(key)
            if existing is None:
                record = AttendanceRecord(employee_id=employee_id, work_date=work_date, check_in=check_in, check_out=check_out)
            else:
                record = AttendanceRecord(
                    employee_id=employee_id,
                    work_date=work_date,
                    check_in=existing.check_in,
                    check_out=existing.check_out or check_out,
                )
            self._store.attendance[key] = record
            return record
