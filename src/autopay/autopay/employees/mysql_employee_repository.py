from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..common.datetime_utils import as_utc, to_naive_utc
from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, next_employee_id
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_CREATE_ATTEMPTS = 3


def _to_employee(row: dict) -> Employee:
    return Employee(
        id=row["id"],
        name=row["name"],
        salary=float(row["salary"]),
        role=Role(row["role"]),
        registration_date=as_utc(row["registrationDate"]),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, salary, role, registrationDate FROM employees ORDER BY name ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, salary, role, registrationDate FROM employees WHERE id=%s",
                (employee_id,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM employees")
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def create(self, *, name: str, salary: float, role: Role, registration_date: datetime) -> Employee:
        # The first id of a prefix only takes a gap lock, so concurrent creates can deadlock; retry those.
        attempt = 1
        while True:
            try:
                return self._create_once(name=name, salary=salary, role=role, registration_date=registration_date)
            except mysql.connector.Error as e:
                if e.errno != errorcode.ER_LOCK_DEADLOCK or attempt >= _CREATE_ATTEMPTS:
                    raise
                logger.warning("[directory] deadlock assigning %s id, retrying (attempt %s)", role.id_prefix, attempt)
                attempt += 1

    def _create_once(self, *, name: str, salary: float, role: Role, registration_date: datetime) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            # Locks the prefix range so two concurrent creates cannot pick the same sequence.
            cur.execute(
                """
                SELECT id FROM employees
                WHERE id LIKE %s
                ORDER BY id DESC
                LIMIT 1
                FOR UPDATE
                """,
                (f"{role.id_prefix}-%",),
            )
            last = fetchone(cur)
            employee = Employee(
                id=next_employee_id(role, [last["id"]] if last else []),
                name=name,
                salary=float(salary),
                role=role,
                registration_date=registration_date,
            )
            cur.execute(
                """
                INSERT INTO employees(id, name, salary, role, registrationDate)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (employee.id, employee.name, employee.salary, role.value, to_naive_utc(registration_date)),
            )
            return employee

    def update_salary(self, employee_id: str, salary: float) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET salary=%s WHERE id=%s", (float(salary), employee_id))
            cur.execute(
                "SELECT id, name, salary, role, registrationDate FROM employees WHERE id=%s",
                (employee_id,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def delete_by_id(self, employee_id: str) -> bool:
        # attendance and payslips go with it (ON DELETE CASCADE)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
            return cur.rowcount > 0
