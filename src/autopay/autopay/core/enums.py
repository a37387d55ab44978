from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role, ordered by privilege: Admin > Clerk > Employee."""

    ADMIN = "Admin"
    CLERK = "Clerk"
    EMPLOYEE = "Employee"

    @property
    def id_prefix(self) -> str:
        return {Role.ADMIN: "ADM", Role.CLERK: "CLK", Role.EMPLOYEE: "EMP"}[self]


class ClockAction(str, Enum):
    """What a clock event did to today's record."""

    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"
