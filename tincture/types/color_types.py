from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

from ..errors import UnsupportedColorSpaceError


class ColorSpace(str, Enum):
    RGB = "rgb"
    CMYK = "cmyk"
    HSL = "hsl"
    HSV = "hsv"
    XYZ = "xyz"


Scalar = int | float
Octets3 = Tuple[int, int, int]
Octets4 = Tuple[int, int, int, int]
Ratios3 = Tuple[float, float, float]
ColorElement = Union[Octets3, Octets4, Ratios3]
ColorSpaceName = Union[ColorSpace, str]

HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSV}


def to_color_space(name: ColorSpaceName) -> ColorSpace:
    """Resolve a color space name (case-insensitive) or enum member."""
    if isinstance(name, ColorSpace):
        return name
    if not isinstance(name, str):
        raise UnsupportedColorSpaceError(name)
    try:
        return ColorSpace(name.lower())
    except ValueError:
        raise UnsupportedColorSpaceError(name) from None


def is_hue_space(color_space: ColorSpaceName) -> bool:
    """
    Check if the given color space is a hue-based space (HSV or HSL).

    Args:
        color_space: Color space name or enum member
    Returns:
        True if hue-based, False otherwise
    """
    try:
        return to_color_space(color_space) in HUE_SPACES
    except UnsupportedColorSpaceError:
        return False
