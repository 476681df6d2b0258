from __future__ import annotations
from typing import Any, Mapping

from ..errors import UnsupportedColorSpaceError
from ..types.color_types import ColorSpace, ColorSpaceName, to_color_space
from .color_base import ColorBase
from .cmyk import CMYK
from .hsl import HSL
from .hsv import HSV
from .rgb import RGB
from .xyz import XYZ


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}


space_to_class: dict[ColorSpace, type[ColorBase]] = build_registry(RGB, CMYK, HSL, HSV, XYZ)


def get_color_class(color_space: ColorSpaceName) -> type[ColorBase]:
    color_class = space_to_class.get(to_color_space(color_space))
    if color_class is None:
        raise UnsupportedColorSpaceError(color_space)
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpaceName | None = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Every conversion pivots through RGB; converting to the current space
    returns the value unchanged.

    Args:
        to_space: Target color space (e.g. "rgb", "cmyk", "hsl", "hsv", "xyz")

    Returns:
        New ColorBase instance in the target space
    """
    cls = get_color_class(to_space or self.mode)
    return cls.from_color(self)


ColorBase.convert = color_convert


def from_dict(data: Mapping[str, Any]) -> ColorBase:
    """Rebuild a color from the output of ``ColorBase.as_dict``."""
    cls = get_color_class(data["space"])
    return cls(*(data[name] for name in cls.channels))
