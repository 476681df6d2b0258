from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions.to_hsv import unit_rgb_to_hsv
from ..conversions.to_rgb import hsv_to_unit_rgb
from ..types.color_types import ColorSpace
from .color_base import HueColor
from .rgb import RGB


class HSV(HueColor):
    """Hue [0, 360), saturation [0, 1], value [0, 1]."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.HSV
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "v")
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)

    def __init__(self, h: float, s: float, v: float) -> None:
        super().__init__(h, s, v)

    @property
    def v(self) -> float:
        """The V component. ``.value`` is the whole component tuple, as for every space."""
        return self._value[2]

    def with_value(self, value: float) -> HSV:
        return self._replace(v=value)

    def to_rgb(self) -> RGB:
        return RGB.from_ratios(hsv_to_unit_rgb(*self._value))

    @classmethod
    def from_rgb(cls, rgb: RGB) -> HSV:
        return cls(*unit_rgb_to_hsv(*rgb.ratios()))
