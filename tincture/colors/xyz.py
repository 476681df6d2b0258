from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions.to_rgb import xyz_to_unit_rgb
from ..conversions.to_xyz import unit_rgb_to_xyz
from ..types.color_types import ColorSpace
from .color_base import UnitFloatColor
from .rgb import RGB


class XYZ(UnitFloatColor):
    """
    CIE XYZ tristimulus referenced to sRGB (D65), each component clamped to [0, 1].

    Converting back to RGB clamps every channel into [0, 255]; XYZ values
    outside the sRGB gamut therefore land on the gamut boundary.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.XYZ
    channels: ClassVar[Tuple[str, ...]] = ("x", "y", "z")
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z)

    @property
    def x(self) -> float:
        return self._value[0]

    @property
    def y(self) -> float:
        return self._value[1]

    @property
    def z(self) -> float:
        return self._value[2]

    def with_x(self, x: float) -> XYZ:
        return self._replace(x=x)

    def with_y(self, y: float) -> XYZ:
        return self._replace(y=y)

    def with_z(self, z: float) -> XYZ:
        return self._replace(z=z)

    def to_rgb(self) -> RGB:
        return RGB.from_ratios(xyz_to_unit_rgb(*self._value))

    @classmethod
    def from_rgb(cls, rgb: RGB) -> XYZ:
        return cls(*unit_rgb_to_xyz(*rgb.ratios()))
