import logging
from typing import Tuple

from ..types.constants import HUE_SECTOR
from ..utils.num_utils import nearly_equal, normalize_hue

logger = logging.getLogger(__name__)


def _hue_from_sector(ratios: Tuple[float, float, float], max_index: int, delta: float) -> float:
    """Standard hue-sector formula, offset by 0/2/4 sectors for a red/green/blue maximum."""
    r, g, b = ratios
    if max_index == 0:
        sector = (g - b) / delta
    elif max_index == 1:
        sector = (b - r) / delta + 2.0
    else:
        sector = (r - g) / delta + 4.0
    return HUE_SECTOR * sector


def min_max_index(r: float, g: float, b: float) -> Tuple[float, float, int]:
    """Return ``(min, max, index of max)``; the first maximal channel wins ties."""
    ratios = (r, g, b)
    max_c = max(ratios)
    return min(ratios), max_c, ratios.index(max_c)


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB ratios to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    min_c, max_c, max_index = min_max_index(r, g, b)
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2.0

    # Grayscale: hue and saturation are undefined, pin them to 0
    if nearly_equal(delta, 0.0):
        logger.debug("rgb=(%s, %s, %s) is grayscale, hsl=(0, 0, %s)", r, g, b, lightness)
        return 0.0, 0.0, lightness

    if lightness > 0.5:
        saturation = delta / (2.0 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    hue = normalize_hue(_hue_from_sector((r, g, b), max_index, delta))

    logger.debug("rgb=(%s, %s, %s) -> hsl=(%s, %s, %s)", r, g, b, hue, saturation, lightness)
    return hue, saturation, lightness
