from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import is_clock_time


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_clock_time(value: str, field_name: str) -> str:
    if not is_clock_time(value):
        raise ValidationError(f"{field_name} must be a time in HH:MM format")
    return value.strip()


def require_int_range(value, field_name: str, *, min_value: int, max_value: int | None = None) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number") from None
    if number < min_value or (max_value is not None and number > max_value):
        if max_value is None:
            raise ValidationError(f"{field_name} must be at least {min_value}")
        raise ValidationError(f"{field_name} must be between {min_value} and {max_value}")
    return number


def require_bool(value, field_name: str) -> bool:
    """Accept JSON booleans, 0/1 and the strings "true"/"false"/"1"/"0"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in {"true", "false", "1", "0"}:
        return value.strip().lower() in {"true", "1"}
    raise ValidationError(f"{field_name} must be true or false")
