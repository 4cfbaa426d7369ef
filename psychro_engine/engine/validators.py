"""
Common argument validators.

Each check raises InvalidArgumentError with the offending value in the
message. Nothing is clamped or corrected.
"""

import math

from psychro_engine.exceptions import InvalidArgumentError


def require_finite(value: float, name: str) -> float:
    if value is None:
        raise InvalidArgumentError(f"{name} is required")
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be a finite number, got {value}")
    return value


def require_non_negative(value: float, name: str) -> float:
    require_finite(value, name)
    if value < 0.0:
        raise InvalidArgumentError(f"{name} must not be negative, got {value}")
    return value


def require_positive(value: float, name: str) -> float:
    require_finite(value, name)
    if value <= 0.0:
        raise InvalidArgumentError(f"{name} must be greater than 0, got {value}")
    return value


def require_between(value: float, low: float, high: float, name: str) -> float:
    """Inclusive range check."""
    require_finite(value, name)
    if not (low <= value <= high):
        raise InvalidArgumentError(
            f"{name} = {value} is outside the allowed range [{low}, {high}]"
        )
    return value


def require_above(value: float, low: float, name: str) -> float:
    """Exclusive lower bound check."""
    require_finite(value, name)
    if value <= low:
        raise InvalidArgumentError(f"{name} must be greater than {low}, got {value}")
    return value


def require_below_or_equal(value: float, high: float, name: str) -> float:
    require_finite(value, name)
    if value > high:
        raise InvalidArgumentError(f"{name} must not exceed {high}, got {value}")
    return value
