from __future__ import annotations

from typing import Protocol, Sequence

from .model import Payslip


class PayslipRepository(Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[Payslip]:
        raise NotImplementedError

    def upsert(self, payslip: Payslip) -> Payslip:
        """Insert or fully replace the payslip for (employee_id, month) in one atomic write."""

        raise NotImplementedError
