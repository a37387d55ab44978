from __future__ import annotations

from datetime import timedelta

import pytest

from src.autopay.autopay.attendance.service import AttendanceService
from src.autopay.autopay.core.enums import Role
from src.autopay.autopay.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.autopay.autopay.employees.model import next_employee_id
from src.autopay.autopay.employees.service import DirectoryService, creatable_roles
from src.autopay.autopay.payroll.service import PayslipService


@pytest.fixture
def directory(employees_repo):
    return DirectoryService(employees_repo)


def test_ids_are_sequenced_per_role_prefix(directory, fixed_now):
    first_admin = directory.create_employee(name="Ann", salary=5000, role=Role.ADMIN, acting_role=Role.ADMIN, now=fixed_now)
    second_admin = directory.create_employee(name="Bob", salary=5000, role=Role.ADMIN, acting_role=Role.ADMIN, now=fixed_now)
    employee = directory.create_employee(name="Cat", salary=3000, role=Role.EMPLOYEE, acting_role=Role.ADMIN, now=fixed_now)
    clerk = directory.create_employee(name="Dan", salary=3200, role=Role.CLERK, acting_role=Role.ADMIN, now=fixed_now)

    assert first_admin.id == "ADM-00001"
    assert second_admin.id == "ADM-00002"
    assert employee.id == "EMP-00001"
    assert clerk.id == "CLK-00001"


def test_next_employee_id_follows_highest_sequence():
    existing = ["EMP-00001", "EMP-00007", "ADM-00020", "EMP-bogus"]

    assert next_employee_id(Role.EMPLOYEE, existing) == "EMP-00008"
    assert next_employee_id(Role.CLERK, existing) == "CLK-00001"


def test_create_trims_name_and_records_registration(directory, fixed_now):
    emp = directory.create_employee(name="  Erin  ", salary="4400", role=Role.EMPLOYEE, acting_role=Role.CLERK, now=fixed_now)

    assert emp.name == "Erin"
    assert emp.salary == 4400.0
    assert emp.registration_date == fixed_now


@pytest.mark.parametrize("name,salary", [("", 100), ("   ", 100), ("Erin", 0), ("Erin", -5), ("Erin", None), ("Erin", "abc")])
def test_create_rejects_invalid_input(directory, employees_repo, name, salary):
    with pytest.raises(ValidationError):
        directory.create_employee(name=name, salary=salary, role=Role.EMPLOYEE, acting_role=Role.ADMIN)

    assert employees_repo.count() == 0


def test_role_gating_for_registration(directory):
    assert creatable_roles(Role.ADMIN) == [Role.ADMIN, Role.CLERK, Role.EMPLOYEE]
    assert creatable_roles(Role.CLERK) == [Role.CLERK, Role.EMPLOYEE]
    assert creatable_roles(Role.EMPLOYEE) == []

    with pytest.raises(AuthorizationError):
        directory.create_employee(name="X", salary=100, role=Role.ADMIN, acting_role=Role.CLERK)
    with pytest.raises(AuthorizationError):
        directory.create_employee(name="X", salary=100, role=Role.EMPLOYEE, acting_role=Role.EMPLOYEE)


def test_first_admin_only_on_empty_directory(directory, fixed_now):
    assert directory.needs_setup()

    admin = directory.create_first_admin(name="Root", salary=6000, now=fixed_now)

    assert admin.id == "ADM-00001"
    assert admin.role == Role.ADMIN
    assert not directory.needs_setup()
    with pytest.raises(ValidationError):
        directory.create_first_admin(name="Again", salary=6000)


def test_update_salary(directory):
    emp = directory.create_employee(name="Erin", salary=4400, role=Role.EMPLOYEE, acting_role=Role.ADMIN)

    updated = directory.update_salary(emp.id, 4800, acting_role=Role.ADMIN)

    assert updated.salary == 4800
    assert directory.get_employee(emp.id).salary == 4800
    assert updated.registration_date == emp.registration_date


def test_update_salary_rules(directory):
    emp = directory.create_employee(name="Erin", salary=4400, role=Role.EMPLOYEE, acting_role=Role.ADMIN)

    with pytest.raises(AuthorizationError):
        directory.update_salary(emp.id, 5000, acting_role=Role.CLERK)
    with pytest.raises(ValidationError):
        directory.update_salary(emp.id, 0, acting_role=Role.ADMIN)
    with pytest.raises(NotFoundError):
        directory.update_salary("EMP-00404", 5000, acting_role=Role.ADMIN)
    assert directory.get_employee(emp.id).salary == 4400


def test_delete_cascades_to_attendance_and_payslips(directory, employees_repo, attendance_repo, payslips_repo, fixed_now):
    emp = directory.create_employee(name="Erin", salary=4400, role=Role.EMPLOYEE, acting_role=Role.ADMIN)
    ledger = AttendanceService(attendance_repo, employees_repo)
    ledger.record_clock_event(emp.id, now=fixed_now)
    ledger.record_clock_event(emp.id, now=fixed_now + timedelta(hours=8))
    PayslipService(employees_repo, attendance_repo, payslips_repo).generate_for_employee(emp.id, now=fixed_now)

    directory.delete_employee(emp.id, acting_role=Role.ADMIN)

    assert employees_repo.get_by_id(emp.id) is None
    assert attendance_repo.list_for_employee(emp.id) == []
    assert payslips_repo.list_for_employee(emp.id) == []


def test_delete_rules(directory):
    emp = directory.create_employee(name="Erin", salary=4400, role=Role.EMPLOYEE, acting_role=Role.ADMIN)

    with pytest.raises(AuthorizationError):
        directory.delete_employee(emp.id, acting_role=Role.CLERK)
    with pytest.raises(NotFoundError):
        directory.delete_employee("EMP-00404", acting_role=Role.ADMIN)


def test_login_is_case_insensitive(directory):
    emp = directory.create_employee(name="Erin", salary=4400, role=Role.EMPLOYEE, acting_role=Role.ADMIN)

    assert directory.login(" emp-00001 ") == emp
    with pytest.raises(NotFoundError):
        directory.login("EMP-00002")
    with pytest.raises(ValidationError):
        directory.login("  ")


def test_list_is_sorted_by_name(directory):
    for name in ("Zed", "Amy", "Moe"):
        directory.create_employee(name=name, salary=100, role=Role.EMPLOYEE, acting_role=Role.ADMIN)

    assert [e.name for e in directory.list_employees()] == ["Amy", "Moe", "Zed"]


@pytest.mark.parametrize("name", [123, 4.5, ["Erin"], {"first": "Erin"}])
def test_non_text_name_is_rejected(directory, employees_repo, name):
    with pytest.raises(ValidationError):
        directory.create_employee(name=name, salary=100, role=Role.EMPLOYEE, acting_role=Role.ADMIN)
    with pytest.raises(ValidationError):
        directory.create_first_admin(name=name, salary=100)

    assert employees_repo.count() == 0


@pytest.mark.parametrize("employee_id", [42, ["EMP-00001"], None])
def test_login_rejects_non_text_id(directory, employee_id):
    directory.create_employee(name="Erin", salary=4400, role=Role.EMPLOYEE, acting_role=Role.ADMIN)

    with pytest.raises(ValidationError):
        directory.login(employee_id)
