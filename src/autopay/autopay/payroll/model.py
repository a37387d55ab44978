from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat_z


@dataclass(frozen=True)
class PayrollFigures:
    """Numbers derived for one employee and one calendar month (no identity, no narrative)."""

    month: str
    year: int
    days_in_month: int
    working_days: int
    monthly_salary: float
    standard_monthly_hours: float
    hourly_rate: float
    total_hours: float
    regular_hours: float
    overtime_hours: float
    regular_pay: float
    overtime_pay: float
    net_payable: float


@dataclass(frozen=True)
class Payslip:
    """Persisted payslip, unique per (employee_id, month).

    `net_payable` is regular + overtime pay; no deductions are modeled.
    """

    id: str
    employee_id: str
    month: str
    year: int
    monthly_salary: float
    hourly_rate: float
    total_hours: float
    overtime_hours: float
    regular_pay: float
    overtime_pay: float
    net_payable: float
    generated_date: datetime
    summary: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "month": self.month,
            "year": self.year,
            "monthlySalary": self.monthly_salary,
            "hourlyRate": self.hourly_rate,
            "totalHours": self.total_hours,
            "overtimeHours": self.overtime_hours,
            "regularPay": self.regular_pay,
            "overtimePay": self.overtime_pay,
            "netPayable": self.net_payable,
            "generatedDate": isoformat_z(self.generated_date),
            "summary": self.summary,
        }
