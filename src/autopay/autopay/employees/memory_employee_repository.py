from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import Role
from ..database.memory_store import MemoryStore
from .model import Employee, next_employee_id
from .repository import EmployeeRepository


class MemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        with self._store.lock:
            return sorted(self._store.employees.values(), key=lambda e: e.name)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._store.lock:
            return self._store.employees.get(employee_id)

    def count(self) -> int:
        with self._store.lock:
            return len(self._store.employees)

    def create(self, *, name: str, salary: float, role: Role, registration_date: datetime) -> Employee:
        with self._store.lock:
            employee = Employee(
                id=next_employee_id(role, self._store.employees.keys()),
                name=name,
                salary=float(salary),
                role=role,
                registration_date=registration_date,
            )
            self._store.employees[employee.id] = employee
            return employee

    def update_salary(self, employee_id: str, salary: float) -> Optional[Employee]:
        with self._store.lock:
            current = self._store.employees.get(employee_id)
            if not current:
                return None
            updated = replace(current, salary=float(salary))
            self._store.employees[employee_id] = updated
            return updated

    def delete_by_id(self, employee_id: str) -> bool:
        with self._store.lock:
            if self._store.employees.pop(employee_id, None) is None:
                return False
            self._store.purge_employee(employee_id)
            return True
