from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import isoformat_z
from ..core.enums import ClockAction


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day.

    Open while `check_out` is None, complete once both timestamps are set.
    """

    employee_id: str
    work_date: date
    check_in: datetime
    check_out: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.check_out is None

    @property
    def is_complete(self) -> bool:
        return self.check_out is not None

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "checkIn": isoformat_z(self.check_in),
            "checkOut": isoformat_z(self.check_out) if self.check_out else None,
        }


@dataclass(frozen=True)
class ClockEventResult:
    record: AttendanceRecord
    action: ClockAction
