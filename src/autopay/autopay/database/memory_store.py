from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import date


@dataclass
class MemoryStore:
    """Process-local store shared by the in-memory repositories.

    One lock guards all tables, so keyed upserts and the cascading delete are atomic.
    """

    employees: dict = field(default_factory=dict)
    attendance: dict[tuple[str, date], object] = field(default_factory=dict)
    payslips: dict[tuple[str, str], object] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock)

    def purge_employee(self, employee_id: str) -> None:
        with self.lock:
            for key in [k for k in self.attendance if k[0] == employee_id]:
                del self.attendance[key]
            for key in [k for k in self.payslips if k[0] == employee_id]:
                del self.payslips[key]
