"""
Scalar interpolation primitives.

All functions clamp ``amount`` to [0, 1] and always interpolate from the
smaller endpoint to the larger one, inverting the ratio when ``start > end``.
The result therefore stays between ``start`` and ``end`` whatever their order.
"""
from typing import Tuple

from ..types.constants import OCTET_MAX
from .num_utils import clamped


def _ordered(start: float, end: float, amount: float) -> Tuple[float, float, float]:
    a = float(clamped(float(amount), 0.0, 1.0))
    if start > end:
        return end, start, 1.0 - a
    return start, end, a


def lerp_u8(start: int, end: int, amount: float) -> int:
    """Linear interpolation between two octets; the scaled span is truncated."""
    s, e, a = _ordered(start, end, amount)
    # 1 - (1 - t) is not exactly t: snap float noise before truncating
    return int(round((e - s) * a, 9)) + int(s)


def lerp_f32(start: float, end: float, amount: float) -> float:
    """Linear interpolation between two floats."""
    s, e, a = _ordered(start, end, amount)
    return (e - s) * a + s


def cerp_f32(
    start: float,
    end: float,
    start_slope: float,
    end_slope: float,
    amount: float,
) -> float:
    """
    Cubic Hermite interpolation.

    Args:
        start, end: Endpoint values
        start_slope, end_slope: Tangents at the endpoints, used as given
        amount: Interpolation parameter, clamped to [0, 1]

    Returns:
        float: h00*min + h10*start_slope + h01*max + h11*end_slope
    """
    s, e, a = _ordered(start, end, amount)
    a2 = a * a
    a3 = a2 * a

    return ((2.0 * a3 - 3.0 * a2 + 1.0) * s
            + (a3 - 2.0 * a2 + a) * start_slope
            + (-2.0 * a3 + 3.0 * a2) * e
            + (a3 - a2) * end_slope)


def cerp_u8(
    start: int,
    end: int,
    start_slope: float,
    end_slope: float,
    amount: float,
) -> int:
    """Cubic interpolation between two octets, clamped to [0, 255] and truncated."""
    value = cerp_f32(float(start), float(end), start_slope, end_slope, amount)
    return int(clamped(value, 0.0, float(OCTET_MAX)))
