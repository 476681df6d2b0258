import logging
from typing import Tuple

from ..types.constants import HUE_SECTOR
from ..utils.num_utils import nearly_equal, normalize_hue
from .to_hsl import min_max_index

logger = logging.getLogger(__name__)


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB ratios to HSV.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    min_c, max_c, max_index = min_max_index(r, g, b)
    delta = max_c - min_c

    if nearly_equal(delta, 0.0):
        logger.debug("rgb=(%s, %s, %s) is grayscale, hsv=(0, 0, %s)", r, g, b, max_c)
        return 0.0, 0.0, max_c

    saturation = 0.0 if nearly_equal(max_c, 0.0) else delta / max_c

    if max_index == 0:
        sector = ((g - b) / delta) % 6.0
    elif max_index == 1:
        sector = (b - r) / delta + 2.0
    else:
        sector = (r - g) / delta + 4.0

    hue = normalize_hue(HUE_SECTOR * sector)

    logger.debug("rgb=(%s, %s, %s) -> hsv=(%s, %s, %s)", r, g, b, hue, saturation, max_c)
    return hue, saturation, max_c
