from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_empty, require_positive_amount
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def creatable_roles(acting_role: Role) -> list[Role]:
    """Roles an actor may register: Admins any role, Clerks Clerk/Employee, Employees none."""
    if acting_role == Role.ADMIN:
        return [Role.ADMIN, Role.CLERK, Role.EMPLOYEE]
    if acting_role == Role.CLERK:
        return [Role.CLERK, Role.EMPLOYEE]
    return []


class DirectoryService:
    """Use case: manage the employee directory (admin panel) and the ID login."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def needs_setup(self) -> bool:
        return self._employees.count() == 0

    def login(self, employee_id: str) -> Employee:
        """Unauthenticated lookup by id, case-insensitive."""
        if employee_id is not None and not isinstance(employee_id, str):
            raise ValidationError("Employee ID must be text")
        employee_id = (employee_id or "").strip().upper()
        if not employee_id:
            raise ValidationError("Employee ID is required")

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee ID not found. Please try again.")
        return employee

    def create_first_admin(self, *, name: str, salary, now: Optional[datetime] = None) -> Employee:
        name = require_non_empty(name, "Name")
        amount = require_positive_amount(salary, "Salary")

        if not self.needs_setup():
            raise ValidationError("The directory is already set up")

        employee = self._employees.create(name=name, salary=amount, role=Role.ADMIN, registration_date=now or now_utc())
        logger.info("[directory] first admin created id=%s", employee.id)
        return employee

    def create_employee(
        self,
        *,
        name: str,
        salary,
        role: Role,
        acting_role: Role,
        now: Optional[datetime] = None,
    ) -> Employee:
        name = require_non_empty(name, "Name")
        amount = require_positive_amount(salary, "Salary")

        if role not in creatable_roles(acting_role):
            raise AuthorizationError(f"{acting_role.value} cannot register a {role.value}")

        employee = self._employees.create(name=name, salary=amount, role=role, registration_date=now or now_utc())
        logger.info("[directory] employee registered id=%s role=%s", employee.id, role.value)
        return employee

    def update_salary(self, employee_id: str, salary, *, acting_role: Role) -> Employee:
        if acting_role != Role.ADMIN:
            raise AuthorizationError("Only admins can update salaries")
        amount = require_positive_amount(salary, "Salary")

        updated = self._employees.update_salary(employee_id, amount)
        if not updated:
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.info("[directory] salary updated id=%s", employee_id)
        return updated

    def delete_employee(self, employee_id: str, *, acting_role: Role) -> None:
        if acting_role != Role.ADMIN:
            raise AuthorizationError("Only admins can remove employees")

        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.info("[directory] employee removed id=%s", employee_id)
