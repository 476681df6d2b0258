from __future__ import annotations
from typing import ClassVar, Iterable, Tuple

from ..conversions.hex_codes import format_hex_code
from ..conversions.to_cmyk import unit_rgb_to_cmyk
from ..conversions.to_rgb import cmyk_to_unit_rgb
from ..types.color_types import ColorSpace
from ..utils.num_utils import ratio_to_octet
from .color_base import OctetColor
from .rgb import RGB


class CMYK(OctetColor):
    """
    8-bit subtractive CMYK.

    Many CMYK values map onto the same RGB value, so a component set here is
    not guaranteed to survive a trip through RGB and back.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = ColorSpace.CMYK
    channels: ClassVar[Tuple[str, ...]] = ("c", "m", "y", "k")
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)

    def __init__(self, c: int, m: int, y: int, k: int) -> None:
        super().__init__(c, m, y, k)

    @classmethod
    def from_hex(cls, value: int) -> CMYK:
        """Unpack ``0xCCMMYYKK``."""
        return cls(*cls._unpack(value))

    @classmethod
    def from_octets(cls, octets: Iterable[int]) -> CMYK:
        return cls(*octets)

    @classmethod
    def from_ratios(cls, ratios: Iterable[float]) -> CMYK:
        return cls(*(ratio_to_octet(r) for r in ratios))

    @property
    def cyan(self) -> int:
        return self._value[0]

    @property
    def magenta(self) -> int:
        return self._value[1]

    @property
    def yellow(self) -> int:
        return self._value[2]

    @property
    def key(self) -> int:
        return self._value[3]

    c = cyan
    m = magenta
    y = yellow
    k = key

    def with_cyan(self, value: int) -> CMYK:
        return self._replace(c=value)

    def with_magenta(self, value: int) -> CMYK:
        return self._replace(m=value)

    def with_yellow(self, value: int) -> CMYK:
        return self._replace(y=value)

    def with_key(self, value: int) -> CMYK:
        return self._replace(k=value)

    def hex_code(self, upper: bool = False) -> str:
        return format_hex_code(self.hex(), 4, upper)

    def __format__(self, spec: str) -> str:
        if spec in ("x", "X"):
            return self.hex_code(upper=spec == "X")
        return format(repr(self), spec)

    def to_rgb(self) -> RGB:
        return RGB.from_ratios(cmyk_to_unit_rgb(*self.ratios()))

    @classmethod
    def from_rgb(cls, rgb: RGB) -> CMYK:
        return cls.from_ratios(unit_rgb_to_cmyk(*rgb.ratios()))
