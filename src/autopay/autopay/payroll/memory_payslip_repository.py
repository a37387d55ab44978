from __future__ import annotations

from typing import Sequence

from ..database.memory_store import MemoryStore
from .model import Payslip
from .repository import PayslipRepository


class MemoryPayslipRepository(PayslipRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_for_employee(self, employee_id: str) -> Sequence[Payslip]:
        with self._store.lock:
            items = [p for (emp, _), p in self._store.payslips.items() if emp == employee_id]
        items.sort(key=lambda p: p.month)
        return items

    def upsert(self, payslip: Payslip) -> Payslip:
        with self._store.lock:
            if payslip.employee_id not in self._store.employees:
                raise KeyError(f"unknown employee {payslip.employee_id}")
            self._store.payslips[(payslip.employee_id, payslip.month)] = payslip
            return payslip
