from __future__ import annotations

from datetime import timedelta

from src.autopay.autopay.core.enums import Role


def test_upsert_keeps_original_check_in(attendance_repo, employees_repo, fixed_now):
    emp = employees_repo.create(name="A", salary=1000, role=Role.EMPLOYEE, registration_date=fixed_now)

    attendance_repo.upsert_record(employee_id=emp.id, work_date=fixed_now.date(), check_in=fixed_now)
    rec = attendance_repo.upsert_record(
        employee_id=emp.id,
        work_date=fixed_now.date(),
        check_in=fixed_now + timedelta(minutes=5),
    )

    assert rec.check_in == fixed_now
    assert rec.check_out is None


def test_upsert_never_overwrites_check_out(attendance_repo, employees_repo, fixed_now):
    emp = employees_repo.create(name="A", salary=1000, role=Role.EMPLOYEE, registration_date=fixed_now)
    first_out = fixed_now + timedelta(hours=8)

    attendance_repo.upsert_record(employee_id=emp.id, work_date=fixed_now.date(), check_in=fixed_now)
    attendance_repo.upsert_record(
        employee_id=emp.id, work_date=fixed_now.date(), check_in=fixed_now, check_out=first_out
    )
    rec = attendance_repo.upsert_record(
        employee_id=emp.id,
        work_date=fixed_now.date(),
        check_in=fixed_now,
        check_out=first_out + timedelta(hours=1),
    )

    assert rec.check_out == first_out
    assert len(attendance_repo.list_for_employee(emp.id)) == 1
