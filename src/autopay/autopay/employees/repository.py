from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee directory.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def create(self, *, name: str, salary: float, role: Role, registration_date: datetime) -> Employee:
        """Insert a new employee, assigning the next id of the role's prefix atomically."""

        raise NotImplementedError

    def update_salary(self, employee_id: str, salary: float) -> Optional[Employee]:
        """Returns the updated employee, or None when the id does not exist."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        """Delete the employee and, with it, its attendance records and payslips."""

        raise NotImplementedError
