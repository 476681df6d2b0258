import logging
from typing import Tuple

import numpy as np

from ..types.constants import HUE_SECTOR, XYZ_TO_SRGB
from ..utils.num_utils import normalize_hue

logger = logging.getLogger(__name__)


def _sextant(h: float, c: float, x: float) -> Tuple[float, float, float]:
    """Place chroma and the second-largest component by 60 degree hue sector."""
    hue_section = min(int(h // HUE_SECTOR), 5)

    if hue_section == 0:
        return c, x, 0.0
    elif hue_section == 1:
        return x, c, 0.0
    elif hue_section == 2:
        return 0.0, c, x
    elif hue_section == 3:
        return 0.0, x, c
    elif hue_section == 4:
        return x, 0.0, c
    return c, 0.0, x


## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to RGB ratios.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = s * (1.0 - abs(2.0 * l - 1.0))
    x = c * (1.0 - abs((h / HUE_SECTOR) % 2.0 - 1.0))
    m = l - c / 2.0

    r, g, b = _sextant(h, c, x)
    logger.debug("hsl=(%s, %s, %s): c=%s, x=%s, m=%s", h, s, l, c, x, m)
    return r + m, g + m, b + m


## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to RGB ratios.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = v * s
    x = c * (1.0 - abs((h / HUE_SECTOR) % 2.0 - 1.0))
    m = v - c

    r, g, b = _sextant(h, c, x)
    logger.debug("hsv=(%s, %s, %s): c=%s, x=%s, m=%s", h, s, v, c, x, m)
    return r + m, g + m, b + m


## CMYK to RGB conversions

def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    """Each RGB ratio is ``(1 - ink) * (1 - key)``."""
    kn = 1.0 - k
    return (1.0 - c) * kn, (1.0 - m) * kn, (1.0 - y) * kn


## XYZ to RGB conversions

def xyz_to_unit_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """
    Convert XYZ to RGB ratios with the inverse sRGB matrix.

    The result is NOT clamped: colors outside the sRGB gamut come back with
    ratios below 0 or above 1. Callers building octets must clamp.
    """
    r, g, b = XYZ_TO_SRGB @ np.array([x, y, z], dtype=float)
    if min(r, g, b) < 0.0 or max(r, g, b) > 1.0:
        logger.debug("xyz=(%s, %s, %s) is outside the sRGB gamut: rgb=(%s, %s, %s)", x, y, z, r, g, b)
    return float(r), float(g), float(b)
