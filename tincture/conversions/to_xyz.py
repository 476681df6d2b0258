import logging
from typing import Tuple

import numpy as np

from ..types.constants import SRGB_TO_XYZ

logger = logging.getLogger(__name__)


def unit_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB ratios to CIE XYZ with the sRGB (D65) matrix.

    The ratios are treated as linear light; no gamma decoding is applied.
    """
    x, y, z = SRGB_TO_XYZ @ np.array([r, g, b], dtype=float)
    logger.debug("rgb=(%s, %s, %s) -> xyz=(%s, %s, %s)", r, g, b, x, y, z)
    return float(x), float(y), float(z)
