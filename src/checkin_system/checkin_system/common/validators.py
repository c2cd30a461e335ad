from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must be a non-empty string")
    return value.strip()


def require_coordinate(value: Any, field_name: str, *, limit: float) -> float:
    """Coerce a latitude/longitude value to float within ``[-limit, limit]``."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be finite")
    if abs(number) > limit:
        raise ValidationError(f"{field_name} must be between -{limit:g} and {limit:g}")
    return number
