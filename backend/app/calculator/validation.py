"""
Numeric input checks shared by the calculator steps.
"""

import math

from .errors import ValidationError


def require_finite(value, field: str, name: str) -> float:
    """Convert a numeric input to float, rejecting booleans, overflow, inf and nan."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number", field=field)
    try:
        number = float(value)
    except OverflowError:
        raise ValidationError(f"{name} is too large", field=field)
    if not math.isfinite(number):
        raise ValidationError(f"{name} must be a finite number", field=field)
    return number


def require_count(value, field: str, name: str) -> int:
    """Check that a player count is a whole number of at least 1 that fits in a float."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be a whole number", field=field)
    if value < 1:
        raise ValidationError(f"{name} must be at least 1", field=field)
    require_finite(value, field, name)
    return value
