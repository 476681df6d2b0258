from __future__ import annotations
from typing import ClassVar, Iterable, Tuple

from ..conversions.hex_codes import format_hex_code, parse_hex_code
from ..types.color_types import ColorSpace
from ..utils.num_utils import ratio_to_octet
from .color_base import OctetColor


class RGB(OctetColor):
    """
    8-bit RGB, the hub every other space converts through.

    >>> RGB.from_hex_code("#f80")
    RGB(r=255, g=136, b=0)
    >>> RGB(255, 136, 0).hex_code()
    '#ff8800'
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    channels: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)

    def __init__(self, r: int, g: int, b: int) -> None:
        super().__init__(r, g, b)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_hex(cls, value: int) -> RGB:
        """Unpack ``0xRRGGBB``; bits above the low 24 are ignored."""
        return cls(*cls._unpack(value))

    @classmethod
    def from_hex_code(cls, code: str) -> RGB:
        """Parse ``#RRGGBB`` or ``#RGB``; raises HexCodeParseError otherwise."""
        return cls.from_hex(parse_hex_code(code))

    @classmethod
    def from_octets(cls, octets: Iterable[int]) -> RGB:
        return cls(*octets)

    @classmethod
    def from_ratios(cls, ratios: Iterable[float]) -> RGB:
        """Clamp each ratio to [0, 1] and scale to an octet, rounding half up."""
        return cls(*(ratio_to_octet(r) for r in ratios))

    # ------------------ COMPONENTS ------------------
    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    r = red
    g = green
    b = blue

    def with_red(self, value: int) -> RGB:
        return self._replace(r=value)

    def with_green(self, value: int) -> RGB:
        return self._replace(g=value)

    def with_blue(self, value: int) -> RGB:
        return self._replace(b=value)

    # ------------------ ENCODINGS ------------------
    def hex_code(self, upper: bool = False) -> str:
        return format_hex_code(self.hex(), 3, upper)

    def __format__(self, spec: str) -> str:
        if spec in ("x", "X"):
            return self.hex_code(upper=spec == "X")
        return format(repr(self), spec)

    def to_floats(self) -> Tuple[float, float, float]:
        return self.ratios()  # type: ignore[return-value]

    def to_floats4(self) -> Tuple[float, float, float, float]:
        """Ratios with a trailing zero alpha, for renderers expecting four floats."""
        r, g, b = self.ratios()
        return r, g, b, 0.0

    # ------------------ CONVERSION CAPABILITY ------------------
    def to_rgb(self) -> RGB:
        return self

    @classmethod
    def from_rgb(cls, rgb: RGB) -> RGB:
        return rgb
