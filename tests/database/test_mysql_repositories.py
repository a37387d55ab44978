from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import mysql.connector
import pytest
from mysql.connector import errorcode

from src.autopay.autopay.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.autopay.autopay.core.enums import Role
from src.autopay.autopay.employees.mysql_employee_repository import MySQLEmployeeRepository
from src.autopay.autopay.payroll.model import Payslip
from src.autopay.autopay.payroll.mysql_payslip_repository import MySQLPayslipRepository


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn

    def execute(self, sql, params=None):
        self._conn.statements.append((" ".join(sql.split()), params))
        if self._conn.factory.errors:
            error = self._conn.factory.errors.pop(0)
            if error is not None:
                raise error

    def fetchone(self):
        rows = self._conn.factory.rows
        return rows.pop(0) if rows else None

    def fetchall(self):
        rows, self._conn.factory.rows = self._conn.factory.rows, []
        return rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, factory):
        self.factory = factory
        self.statements = []
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnectionFactory:
    """Stands in for DatabaseConnection; `errors` is consumed one per execute()."""

    def __init__(self, *, errors=None, rows=None):
        self.errors = list(errors or [])
        self.rows = list(rows or [])
        self.connections = []

    def connect(self):
        conn = FakeConnection(self)
        self.connections.append(conn)
        return conn


def _deadlock():
    return mysql.connector.errors.DatabaseError(msg="Deadlock found", errno=errorcode.ER_LOCK_DEADLOCK)


@pytest.fixture
def fixed_utc():
    return datetime(2026, 2, 2, 8, 30, tzinfo=timezone.utc)


def test_create_retries_after_deadlock(fixed_utc):
    factory = FakeConnectionFactory(errors=[_deadlock()])
    repo = MySQLEmployeeRepository(factory)

    employee = repo.create(name="Erin", salary=4400, role=Role.EMPLOYEE, registration_date=fixed_utc)

    assert employee.id == "EMP-00001"
    assert len(factory.connections) == 2
    assert factory.connections[0].rolled_back
    assert factory.connections[1].committed


def test_create_gives_up_after_repeated_deadlocks(fixed_utc):
    factory = FakeConnectionFactory(errors=[_deadlock(), _deadlock(), _deadlock()])
    repo = MySQLEmployeeRepository(factory)

    with pytest.raises(mysql.connector.Error):
        repo.create(name="Erin", salary=4400, role=Role.EMPLOYEE, registration_date=fixed_utc)

    assert len(factory.connections) == 3


def test_create_does_not_retry_other_errors(fixed_utc):
    duplicate = mysql.connector.errors.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY)
    factory = FakeConnectionFactory(errors=[None, duplicate])
    repo = MySQLEmployeeRepository(factory)

    with pytest.raises(mysql.connector.errors.IntegrityError):
        repo.create(name="Erin", salary=4400, role=Role.EMPLOYEE, registration_date=fixed_utc)

    assert len(factory.connections) == 1


def test_create_continues_the_prefix_sequence(fixed_utc):
    factory = FakeConnectionFactory(rows=[{"id": "CLK-00041"}])
    repo = MySQLEmployeeRepository(factory)

    clerk = repo.create(name="Cole", salary=3800, role=Role.CLERK, registration_date=fixed_utc)

    assert clerk.id == "CLK-00042"
    select_sql, select_params = factory.connections[0].statements[0]
    assert select_sql.endswith("FOR UPDATE")
    assert select_params == ("CLK-%",)


def test_attendance_upsert_uses_row_alias(fixed_utc):
    checked_out = fixed_utc + timedelta(hours=8)
    row = {
        "employeeId": "EMP-00001",
        "date": date(2026, 2, 2),
        "checkIn": fixed_utc.replace(tzinfo=None),
        "checkOut": checked_out.replace(tzinfo=None),
    }
    factory = FakeConnectionFactory(rows=[row])
    repo = MySQLAttendanceRepository(factory)

    record = repo.upsert_record(
        employee_id="EMP-00001", work_date=date(2026, 2, 2), check_in=fixed_utc, check_out=checked_out
    )

    sql, params = factory.connections[0].statements[0]
    assert "AS new ON DUPLICATE KEY UPDATE" in sql
    assert "checkOut = COALESCE(attendance.checkOut, new.checkOut)" in sql
    assert "VALUES(checkOut)" not in sql
    assert params[2] == datetime(2026, 2, 2, 8, 30)
    assert record.check_out == checked_out


def test_payslip_upsert_uses_row_alias(fixed_utc):
    factory = FakeConnectionFactory()
    repo = MySQLPayslipRepository(factory)
    payslip = Payslip(
        id="PS-EMP-00001-1",
        employee_id="EMP-00001",
        month="2026-02",
        year=2026,
        monthly_salary=4400.0,
        hourly_rate=27.5,
        total_hours=170.0,
        overtime_hours=10.0,
        regular_pay=4400.0,
        overtime_pay=412.5,
        net_payable=4812.5,
        generated_date=fixed_utc,
        summary="ok",
    )

    assert repo.upsert(payslip) is payslip

    sql, params = factory.connections[0].statements[0]
    update_clause = sql.split("ON DUPLICATE KEY UPDATE", 1)[1]
    assert ") AS new ON DUPLICATE KEY UPDATE" in sql
    assert "id = new.id" in update_clause
    assert "summary = new.summary" in update_clause
    assert "VALUES(" not in update_clause
    assert params[11] == datetime(2026, 2, 2, 8, 30)
    assert factory.connections[0].committed
