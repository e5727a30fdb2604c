from numbers import Real
from typing import Any, Optional

from .errors import ValidationError


def require_int(value: Any, field: str, minimum: Optional[int] = None) -> int:
    # bool is an int subclass; JSON true/false is never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer")
    if minimum is not None and value < minimum:
        raise ValidationError(f"{field} must be at least {minimum}")
    return value


def require_bool(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field} must be a boolean")
    return value


def require_positive_number(value: Any, field: str, maximum: Optional[float] = None) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{field} must be a number")
    if not value > 0 or value == float('inf'):
        raise ValidationError(f"{field} must be a positive number")
    if maximum is not None and value > maximum:
        raise ValidationError(f"{field} must be at most {maximum}")
    return value


def require_string(value: Any, field: str, allow_empty: bool = True) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    if not allow_empty and not value:
        raise ValidationError(f"{field} is required")
    return value
