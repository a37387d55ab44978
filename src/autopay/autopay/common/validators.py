from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} is required" if value is None else f"{field_name} must be text")
    if not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_positive_amount(value: Any, field_name: str) -> float:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError(f"{field_name} must be a positive number")
    return amount
