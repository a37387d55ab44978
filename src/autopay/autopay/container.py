from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .database.memory_store import MemoryStore
from .employees.memory_employee_repository import MemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import DirectoryService
from .payroll.calculator.base import PayrollCalculator
from .payroll.memory_payslip_repository import MemoryPayslipRepository
from .payroll.mysql_payslip_repository import MySQLPayslipRepository
from .payroll.narrative.base import PayslipNarrator
from .payroll.repository import PayslipRepository
from .payroll.service import PayslipService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    payslips_repo: PayslipRepository

    directory_service: DirectoryService
    attendance_service: AttendanceService
    payslip_service: PayslipService


def build_container(
    *,
    db_config: Optional[dict] = None,
    storage_backend: str = "mysql",
    calculator: Optional[PayrollCalculator] = None,
    narrator: Optional[PayslipNarrator] = None,
) -> Container:
    conn: Optional[DatabaseConnection] = None

    if storage_backend == "memory":
        store = MemoryStore()
        employees_repo = MemoryEmployeeRepository(store)
        attendance_repo = MemoryAttendanceRepository(store)
        payslips_repo = MemoryPayslipRepository(store)
    elif storage_backend == "mysql":
        if not db_config:
            raise ValueError("db_config is required for the mysql storage backend")
        config = DBConfig(
            host=str(db_config["host"]),
            port=int(db_config.get("port", 3306)),
            user=str(db_config["user"]),
            password=str(db_config["password"]),
            database=str(db_config["database"]),
        )
        conn = DatabaseConnection.get_instance(config)
        employees_repo = MySQLEmployeeRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        payslips_repo = MySQLPayslipRepository(conn)
    else:
        raise ValueError(f"Unknown storage backend: {storage_backend!r}")

    directory_service = DirectoryService(employees_repo)
    attendance_service = AttendanceService(attendance_repo, employees_repo)
    payslip_service = PayslipService(
        employees_repo,
        attendance_repo,
        payslips_repo,
        calculator=calculator,
        narrator=narrator,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        payslips_repo=payslips_repo,
        directory_service=directory_service,
        attendance_service=attendance_service,
        payslip_service=payslip_service,
    )
