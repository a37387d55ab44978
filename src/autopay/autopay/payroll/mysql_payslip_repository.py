from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import as_utc, to_naive_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Payslip
from .repository import PayslipRepository

_COLUMNS = (
    "id, employeeId, month, year, monthlySalary, hourlyRate, totalHours, overtimeHours, "
    "regularPay, overtimePay, netPayable, generatedDate, summary"
)


def _to_payslip(row: dict) -> Payslip:
    return Payslip(
        id=row["id"],
        employee_id=row["employeeId"],
        month=row["month"],
        year=int(row["year"]),
        monthly_salary=float(row["monthlySalary"]),
        hourly_rate=float(row["hourlyRate"]),
        total_hours=float(row["totalHours"]),
        overtime_hours=float(row["overtimeHours"]),
        regular_pay=float(row["regularPay"]),
        overtime_pay=float(row["overtimePay"]),
        net_payable=float(row["netPayable"]),
        generated_date=as_utc(row["generatedDate"]),
        summary=row.get("summary"),
    )


class MySQLPayslipRepository(PayslipRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: str) -> Sequence[Payslip]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payslips WHERE employeeId=%s ORDER BY month ASC",
                (employee_id,),
            )
            return [_to_payslip(r) for r in fetchall(cur)]

    def upsert(self, payslip: Payslip) -> Payslip:
        p = payslip
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO payslips({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE
                    id = new.id,
                    year = new.year,
                    monthlySalary = new.monthlySalary,
                    hourlyRate = new.hourlyRate,
                    totalHours = new.totalHours,
                    overtimeHours = new.overtimeHours,
                    regularPay = new.regularPay,
                    overtimePay = new.overtimePay,
                    netPayable = new.netPayable,
                    generatedDate = new.generatedDate,
                    summary = new.summary
                """,
                (
                    p.id,
                    p.employee_id,
                    p.month,
                    p.year,
                    p.monthly_salary,
                    p.hourly_rate,
                    p.total_hours,
                    p.overtime_hours,
                    p.regular_pay,
                    p.overtime_pay,
                    p.net_payable,
                    to_naive_utc(p.generated_date),
                    p.summary,
                ),
            )
        return payslip
