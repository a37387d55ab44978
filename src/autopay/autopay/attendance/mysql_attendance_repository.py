from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import as_utc, to_naive_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id=row["employeeId"],
        work_date=row["date"],
        check_in=as_utc(row["checkIn"]),
        check_out=as_utc(row["checkOut"]) if row.get("checkOut") else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employeeId, date, checkIn, checkOut
                FROM attendance
                WHERE employeeId=%s
                ORDER BY date ASC
                """,
                (employee_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employeeId, date, checkIn, checkOut
                FROM attendance
                WHERE employeeId=%s AND date=%s
                """,
                (employee_id, work_date),
            )
            row = fetchone(cur)
            return _to_record(row) if row else None

    def upsert_record(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in: datetime,
        check_out: Optional[datetime] = None,
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            # checkIn is never replaced; checkOut is only filled while still NULL.
            cur.execute(
                """
                INSERT INTO attendance(employeeId, date, checkIn, checkOut)
                VALUES(%s,%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE
                    checkOut = COALESCE(attendance.checkOut, new.checkOut)
                """,
                (
                    employee_id,
                    work_date,
                    to_naive_utc(check_in),
                    to_naive_utc(check_out) if check_out else None,
                ),
            )
            cur.execute(
                """
                SELECT employeeId, date, checkIn, checkOut
                FROM attendance
                WHERE employeeId=%s AND date=%s
                """,
                (employee_id, work_date),
            )
            return _to_record(fetchone(cur))
