import logging
from typing import Tuple

from ..utils.num_utils import nearly_equal

logger = logging.getLogger(__name__)


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Convert RGB ratios to CMYK ratios.

    Pure black short-circuits to (0, 0, 0, 1) since the general formula
    divides by the largest channel.

    Returns:
        Tuple[float, float, float, float]: (c, m, y, k) in [0, 1]
    """
    max_c = max(r, g, b)

    if nearly_equal(max_c, 0.0):
        logger.debug("rgb=(%s, %s, %s) is black, cmyk=(0, 0, 0, 1)", r, g, b)
        return 0.0, 0.0, 0.0, 1.0

    k = 1.0 - max_c
    c = (1.0 - r - k) / max_c
    m = (1.0 - g - k) / max_c
    y = (1.0 - b - k) / max_c

    logger.debug("rgb=(%s, %s, %s) -> cmyk=(%s, %s, %s, %s)", r, g, b, c, m, y, k)
    return c, m, y, k
