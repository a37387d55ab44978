from __future__ import annotations

import logging
from typing import Optional, Protocol

from ...core.constants import NARRATIVE_FALLBACK
from ...employees.model import Employee

logger = logging.getLogger(__name__)


class PayslipNarrator(Protocol):
    """Best-effort text service writing a short note for a payslip."""

    def summarize(self, employee: Employee, net_pay: float, total_hours: float, overtime_hours: float) -> str:
        raise NotImplementedError


def narrate_or_fallback(
    narrator: Optional[PayslipNarrator],
    employee: Employee,
    *,
    net_pay: float,
    total_hours: float,
    overtime_hours: float,
) -> str:
    """Summary text for the payslip; the fallback when the narrator is absent, fails or answers empty."""
    if narrator is None:
        return NARRATIVE_FALLBACK

    try:
        text = narrator.summarize(employee, net_pay, total_hours, overtime_hours)
    except Exception as ex:
        logger.warning("[narrator] summary failed for employee_id=%s: %s", employee.id, ex)
        return NARRATIVE_FALLBACK

    text = (text or "").strip()
    return text or NARRATIVE_FALLBACK
