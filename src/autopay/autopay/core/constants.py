"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_HOURS_PER_DAY = 8
OVERTIME_MULTIPLIER = 1.5
WORKING_WEEKDAYS = frozenset({0, 1, 2, 3, 4})  # Monday..Friday

EMPLOYEE_ID_DIGITS = 5
DEFAULT_HISTORY_LIMIT = 10
DEFAULT_NARRATIVE_TIMEOUT_SECONDS = 10.0

NARRATIVE_FALLBACK = "Could not generate an AI summary for this payslip. Please refer to the detailed breakdown."
