from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.autopay.autopay.attendance.memory_attendance_repository import MemoryAttendanceRepository
from src.autopay.autopay.container import build_container
from src.autopay.autopay.database.memory_store import MemoryStore
from src.autopay.autopay.employees.memory_employee_repository import MemoryEmployeeRepository
from src.autopay.autopay.main import create_app
from src.autopay.autopay.payroll.memory_payslip_repository import MemoryPayslipRepository


@pytest.fixture
def fixed_now() -> datetime:
    # Monday, 2 February 2026 (a month with exactly 20 weekdays)
    return datetime(2026, 2, 2, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def employees_repo(store) -> MemoryEmployeeRepository:
    return MemoryEmployeeRepository(store)


@pytest.fixture
def attendance_repo(store) -> MemoryAttendanceRepository:
    return MemoryAttendanceRepository(store)


@pytest.fixture
def payslips_repo(store) -> MemoryPayslipRepository:
    return MemoryPayslipRepository(store)


@pytest.fixture
def app():
    container = build_container(storage_backend="memory")
    return create_app("config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()
