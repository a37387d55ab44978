from __future__ import annotations

import logging
from typing import Optional

from openai import OpenAI

from ...core.constants import DEFAULT_NARRATIVE_TIMEOUT_SECONDS
from ...employees.model import Employee

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You write brief, professional and encouraging payslip summaries for employees. "
    "The tone is positive and appreciative. Output plain text only, no markdown."
)


def build_prompt(employee: Employee, net_pay: float, total_hours: float, overtime_hours: float) -> str:
    lines = [
        "Generate a short summary for this employee's payslip.",
        "If there is overtime, acknowledge the extra effort.",
        "",
        "Employee Details:",
        f"- Name: {employee.name}",
        f"- Net Pay for the month: ${net_pay:.2f}",
        f"- Total hours worked this month: {total_hours:.2f}",
        f"- Overtime hours: {overtime_hours:.2f}",
        "",
        "Example Output (with overtime):",
        f'"Dear {employee.name}, here is your payslip. Your hard work is evident from the {total_hours:.2f} hours '
        f"you've dedicated, including {overtime_hours:.2f} hours of overtime. Your commitment is crucial to our "
        'success. Thank you!"',
        "",
        "Example Output (no overtime):",
        f'"Dear {employee.name}, thank you for your consistent hard work and dedication this month. Your efforts '
        "are a valuable contribution to our team's success. We appreciate you!\"",
    ]
    return "\n".join(lines)


class OpenAINarrator:
    """Payslip summaries from an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_NARRATIVE_TIMEOUT_SECONDS,
        temperature: float = 0.5,
        max_tokens: int = 200,
        client: Optional[OpenAI] = None,
    ):
        self._client = client or OpenAI(api_key=api_key, base_url=base_url or None, timeout=timeout, max_retries=0)
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    def summarize(self, employee: Employee, net_pay: float, total_hours: float, overtime_hours: float) -> str:
        response = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(employee, net_pay, total_hours, overtime_hours)},
            ],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        return (response.choices[0].message.content or "").strip()


def build_narrator(
    *,
    api_key: Optional[str],
    model: str,
    base_url: Optional[str] = None,
    timeout: float = DEFAULT_NARRATIVE_TIMEOUT_SECONDS,
) -> Optional[OpenAINarrator]:
    """Narrator when an API key is configured, otherwise None (payslips get the fallback text)."""
    if not api_key:
        logger.warning("[narrator] OPENAI_API_KEY not set; payslip summaries are disabled")
        return None
    return OpenAINarrator(api_key=api_key, model=model, base_url=base_url, timeout=timeout)
