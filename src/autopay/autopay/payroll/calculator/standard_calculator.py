from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import days_in_month, month_key, working_days_in_month
from ...core.constants import OVERTIME_MULTIPLIER, STANDARD_HOURS_PER_DAY, WORKING_WEEKDAYS
from ...core.exceptions import PayrollComputationError
from ..model import PayrollFigures
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary spread over the month's weekday hours, overtime above that at 1.5x.

    Holidays are not modeled; `working_weekdays` and `hours_per_day` define the standard month.
    """

    def __init__(
        self,
        *,
        hours_per_day: float = STANDARD_HOURS_PER_DAY,
        overtime_multiplier: float = OVERTIME_MULTIPLIER,
        working_weekdays: Optional[Iterable[int]] = None,
    ):
        self._hours_per_day = float(hours_per_day)
        self._overtime_multiplier = float(overtime_multiplier)
        self._working_weekdays = frozenset(WORKING_WEEKDAYS if working_weekdays is None else working_weekdays)

    def worked_minutes(self, record: AttendanceRecord) -> float:
        # An unfinished day earns nothing until it has a check-out.
        if not record.check_out:
            return 0.0
        minutes = (record.check_out - record.check_in).total_seconds() / 60
        return max(minutes, 0.0)

    def calculate(self, *, monthly_salary: float, records: Iterable[AttendanceRecord], reference: date) -> PayrollFigures:
        year, month = reference.year, reference.month
        working_days = working_days_in_month(year, month, self._working_weekdays)

        total_minutes = sum(
            self.worked_minutes(r) for r in records if r.work_date.year == year and r.work_date.month == month
        )
        total_hours = total_minutes / 60

        standard_hours = working_days * self._hours_per_day
        if standard_hours <= 0:
            raise PayrollComputationError(f"No standard working hours in {month_key(reference)}")

        salary = float(monthly_salary)
        hourly_rate = salary / standard_hours
        overtime_hours = max(0.0, total_hours - standard_hours)
        regular_hours = total_hours - overtime_hours

        regular_pay = regular_hours * hourly_rate
        overtime_pay = overtime_hours * hourly_rate * self._overtime_multiplier

        return PayrollFigures(
            month=month_key(reference),
            year=year,
            days_in_month=days_in_month(year, month),
            working_days=working_days,
            monthly_salary=salary,
            standard_monthly_hours=standard_hours,
            hourly_rate=hourly_rate,
            total_hours=total_hours,
            regular_hours=regular_hours,
            overtime_hours=overtime_hours,
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            net_payable=regular_pay + overtime_pay,
        )
