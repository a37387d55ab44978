from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from ..common.datetime_utils import isoformat_z
from ..core.constants import EMPLOYEE_ID_DIGITS
from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee of the directory.

    Plain data object (no DB access code). `salary` is the monthly salary.
    """

    id: str
    name: str
    salary: float
    role: Role
    registration_date: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "salary": self.salary,
            "role": self.role.value,
            "registrationDate": isoformat_z(self.registration_date),
        }


def next_employee_id(role: Role, existing_ids: Iterable[str]) -> str:
    """Next id for `role`: `<PREFIX>-<sequence>`, one past the highest sequence of that prefix."""
    prefix = role.id_prefix
    highest = 0
    for employee_id in existing_ids:
        head, _, seq = employee_id.partition("-")
        if head != prefix or not seq.isdigit():
            continue
        highest = max(highest, int(seq))
    return f"{prefix}-{highest + 1:0{EMPLOYEE_ID_DIGITS}d}"
