import math
from numbers import Integral


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (``round`` ties to even)."""
    return math.floor(value + 0.5)


def unit_to_byte(value: float) -> int:
    """Scale a unit-interval float to an 8-bit channel, clamping the result to ``[0, 255]``."""
    return min(255, max(0, round_half_up(value * 255.0)))


def check_positive_int(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    value = int(value)
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")
    return value
