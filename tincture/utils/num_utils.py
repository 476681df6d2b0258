import math
from typing import TypeVar

from boundednumbers import clamp

from ..errors import InvariantViolation
from ..types.constants import FLOAT_EPSILON, FLOAT_MAX, FLOAT_TINY, HUE_PERIOD, OCTET_MAX

T = TypeVar('T', int, float)


def clamped(value: T, lower: T, upper: T) -> T:
    """Restrict ``value`` to ``[lower, upper]``. Inverted bounds are a caller bug."""
    if lower > upper:
        raise InvariantViolation(f"clamped() called with lower={lower!r} > upper={upper!r}")
    return clamp(value, lower, upper)


def distance(a: T, b: T) -> T:
    """Unsigned difference of two ordered scalars."""
    return a - b if a > b else b - a


def nearly_equal(a: float, b: float) -> bool:
    """Float equality with a relative epsilon; exact when either side is zero."""
    if a == b:
        return True
    diff = abs(a - b)
    if a == 0.0 or b == 0.0 or diff < FLOAT_TINY:
        return diff < FLOAT_EPSILON * FLOAT_TINY
    return diff / min(abs(a) + abs(b), FLOAT_MAX) < FLOAT_EPSILON


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    if not math.isfinite(h):
        raise InvariantViolation(f"hue must be finite, got {h!r}")
    h = float(h) % HUE_PERIOD
    # -1e-20 % 360 rounds up to exactly 360.0
    return 0.0 if h >= HUE_PERIOD else h


def ratio_to_octet(ratio: float) -> int:
    """Scale a unit ratio to an 8-bit channel, rounding half up."""
    return int(unit_clamp(ratio) * OCTET_MAX + 0.5)


def octet_to_ratio(octet: int) -> float:
    return octet / OCTET_MAX


def unit_clamp(value: float) -> float:
    """Clamp into [0, 1]; NaN is rejected."""
    if math.isnan(value):
        raise InvariantViolation("unit component must not be NaN")
    return float(clamped(float(value), 0.0, 1.0))
