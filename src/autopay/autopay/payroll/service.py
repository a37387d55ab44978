from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import as_utc, now_utc
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import Payslip
from .narrative.base import PayslipNarrator, narrate_or_fallback
from .repository import PayslipRepository

logger = logging.getLogger(__name__)


class PayslipService:
    """Use case: generate (or regenerate) the current month's payslip for an employee."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        payslips: PayslipRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        narrator: Optional[PayslipNarrator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._payslips = payslips
        self._calculator = calculator or StandardPayrollCalculator()
        self._narrator = narrator

    def generate_for_employee(self, employee_id: str, *, now: Optional[datetime] = None) -> Payslip:
        now = as_utc(now or now_utc())

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        records = self._attendance.list_for_employee(employee_id)
        figures = self._calculator.calculate(monthly_salary=employee.salary, records=records, reference=now.date())

        summary = narrate_or_fallback(
            self._narrator,
            employee,
            net_pay=figures.net_payable,
            total_hours=figures.total_hours,
            overtime_hours=figures.overtime_hours,
        )

        payslip = Payslip(
            id=f"PS-{employee.id}-{int(now.timestamp() * 1000)}",
            employee_id=employee.id,
            month=figures.month,
            year=figures.year,
            monthly_salary=figures.monthly_salary,
            hourly_rate=figures.hourly_rate,
            total_hours=figures.total_hours,
            overtime_hours=figures.overtime_hours,
            regular_pay=figures.regular_pay,
            overtime_pay=figures.overtime_pay,
            net_payable=figures.net_payable,
            generated_date=now,
            summary=summary,
        )
        saved = self._payslips.upsert(payslip)
        logger.info(
            "[payroll] payslip saved employee_id=%s month=%s net=%.2f hours=%.2f",
            employee.id,
            figures.month,
            figures.net_payable,
            figures.total_hours,
        )
        return saved

    def list_for_employee(self, employee_id: str) -> Sequence[Payslip]:
        """Payslips of the employee, most recently generated first."""
        items = list(self._payslips.list_for_employee(employee_id))
        items.sort(key=lambda p: p.generated_date, reverse=True)
        return items
