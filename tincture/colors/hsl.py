from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions.to_hsl import unit_rgb_to_hsl
from ..conversions.to_rgb import hsl_to_unit_rgb
from ..types.color_types import ColorSpace
from .color_base import HueColor
from .rgb import RGB


class HSL(HueColor):
    """Hue [0, 360), saturation [0, 1], lightness [0, 1]."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.HSL
    channels: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)

    def __init__(self, h: float, s: float, l: float) -> None:
        super().__init__(h, s, l)

    @property
    def lightness(self) -> float:
        return self._value[2]

    l = lightness

    def with_lightness(self, lightness: float) -> HSL:
        return self._replace(l=lightness)

    def to_rgb(self) -> RGB:
        return RGB.from_ratios(hsl_to_unit_rgb(*self._value))

    @classmethod
    def from_rgb(cls, rgb: RGB) -> HSL:
        return cls(*unit_rgb_to_hsl(*rgb.ratios()))
