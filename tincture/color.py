from __future__ import annotations
from typing import Any, Tuple

from .colors.cmyk import CMYK
from .colors.hsl import HSL
from .colors.hsv import HSV
from .colors.rgb import RGB
from .colors.xyz import XYZ
from .utils.num_utils import unit_clamp


class Color:
    """
    Single color handle over every supported space.

    Stores RGB and computes the other spaces on demand. Like the space
    types it is immutable: every ``with_*``/adjustment method returns a new
    Color whose RGB value was recomputed through the relevant space, so a
    component set on CMYK/HSL/HSV may read back slightly differently.

    >>> c = Color.from_hex_code("#ff0000")
    >>> c.hue, c.lightness
    (0.0, 0.5)
    >>> c.shift_hue(120).rgb_octets()
    (0, 255, 0)
    """
    __slots__ = ('_rgb', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, color: Any = None) -> None:
        if color is None:
            rgb = RGB(*RGB.null_value)
        elif isinstance(color, Color):
            rgb = color._rgb
        else:
            rgb = RGB.from_color(color)
        self._rgb = rgb
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_hex_code(cls, code: str) -> Color:
        return cls(RGB.from_hex_code(code))

    @classmethod
    def from_hex(cls, value: int) -> Color:
        return cls(RGB.from_hex(value))

    def to_rgb(self) -> RGB:
        return self._rgb

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb == other._rgb

    def __hash__(self) -> int:
        return hash(self._rgb)

    def __repr__(self) -> str:
        return f"Color({self._rgb.hex_code()})"

    def __format__(self, spec: str) -> str:
        return format(self._rgb, spec)

    def __reduce__(self):
        return (self.__class__, (self._rgb,))

    # ------------------ SPACES ------------------
    @property
    def rgb(self) -> RGB:
        return self._rgb

    @property
    def cmyk(self) -> CMYK:
        return CMYK.from_rgb(self._rgb)

    @property
    def hsl(self) -> HSL:
        return HSL.from_rgb(self._rgb)

    @property
    def hsv(self) -> HSV:
        return HSV.from_rgb(self._rgb)

    @property
    def xyz(self) -> XYZ:
        return XYZ.from_rgb(self._rgb)

    # ------------------ GETTERS ------------------
    @property
    def red(self) -> int:
        return self._rgb.red

    @property
    def green(self) -> int:
        return self._rgb.green

    @property
    def blue(self) -> int:
        return self._rgb.blue

    @property
    def cyan(self) -> int:
        return self.cmyk.cyan

    @property
    def magenta(self) -> int:
        return self.cmyk.magenta

    @property
    def yellow(self) -> int:
        return self.cmyk.yellow

    @property
    def key(self) -> int:
        return self.cmyk.key

    @property
    def hue(self) -> float:
        return self.hsl.hue

    @property
    def hsl_saturation(self) -> float:
        return self.hsl.saturation

    @property
    def hsv_saturation(self) -> float:
        return self.hsv.saturation

    @property
    def lightness(self) -> float:
        return self.hsl.lightness

    @property
    def value(self) -> float:
        return self.hsv.v

    # ------------------ SETTERS ------------------
    def with_red(self, value: int) -> Color:
        return Color(self._rgb.with_red(value))

    def with_green(self, value: int) -> Color:
        return Color(self._rgb.with_green(value))

    def with_blue(self, value: int) -> Color:
        return Color(self._rgb.with_blue(value))

    def with_cyan(self, value: int) -> Color:
        return Color(self.cmyk.with_cyan(value))

    def with_magenta(self, value: int) -> Color:
        return Color(self.cmyk.with_magenta(value))

    def with_yellow(self, value: int) -> Color:
        return Color(self.cmyk.with_yellow(value))

    def with_key(self, value: int) -> Color:
        return Color(self.cmyk.with_key(value))

    def with_hue(self, degrees: float) -> Color:
        return Color(self.hsv.with_hue(degrees))

    def with_hsl_saturation(self, value: float) -> Color:
        return Color(self.hsl.with_saturation(value))

    def with_hsv_saturation(self, value: float) -> Color:
        return Color(self.hsv.with_saturation(value))

    def with_lightness(self, value: float) -> Color:
        return Color(self.hsl.with_lightness(value))

    def with_value(self, value: float) -> Color:
        return Color(self.hsv.with_value(value))

    # ------------------ ADJUSTMENTS ------------------
    # Factors are clamped to [0, 1] and scale the current component.
    def shift_hue(self, degrees: float) -> Color:
        return self.with_hue(self.hue + degrees)

    def hsl_saturate(self, factor: float) -> Color:
        s = self.hsl_saturation
        return self.with_hsl_saturation(s + s * unit_clamp(factor))

    def hsl_desaturate(self, factor: float) -> Color:
        s = self.hsl_saturation
        return self.with_hsl_saturation(s - s * unit_clamp(factor))

    def hsv_saturate(self, factor: float) -> Color:
        s = self.hsv_saturation
        return self.with_hsv_saturation(s + s * unit_clamp(factor))

    def hsv_desaturate(self, factor: float) -> Color:
        s = self.hsv_saturation
        return self.with_hsv_saturation(s - s * unit_clamp(factor))

    def lighten(self, factor: float) -> Color:
        l = self.lightness
        return self.with_lightness(l + l * unit_clamp(factor))

    def darken(self, factor: float) -> Color:
        l = self.lightness
        return self.with_lightness(l - l * unit_clamp(factor))

    # ------------------ BULK ACCESSORS ------------------
    def rgb_octets(self) -> Tuple[int, ...]:
        return self._rgb.octets()

    def cmyk_octets(self) -> Tuple[int, ...]:
        return self.cmyk.octets()

    def hsl_components(self) -> Tuple[float, ...]:
        return self.hsl.components()

    def hsv_components(self) -> Tuple[float, ...]:
        return self.hsv.components()

    def xyz_components(self) -> Tuple[float, ...]:
        return self.xyz.components()

    def rgb_ratios(self) -> Tuple[float, ...]:
        return self._rgb.ratios()

    def cmyk_ratios(self) -> Tuple[float, ...]:
        return self.cmyk.ratios()

    def rgb_hex(self) -> int:
        return self._rgb.hex()

    def cmyk_hex(self) -> int:
        return self.cmyk.hex()

    def to_floats(self) -> Tuple[float, float, float]:
        return self._rgb.to_floats()

    def to_floats4(self) -> Tuple[float, float, float, float]:
        return self._rgb.to_floats4()

    def as_dict(self) -> dict:
        return self._rgb.as_dict()

    # ------------------ INTERPOLATION & DISTANCE ------------------
    @classmethod
    def rgb_linear_interpolate(cls, start: Any, end: Any, amount: float) -> Color:
        return cls(RGB.linear_interpolate(start, end, amount))

    @classmethod
    def rgb_cubic_interpolate(cls, start: Any, end: Any, start_slope: float, end_slope: float, amount: float) -> Color:
        return cls(RGB.cubic_interpolate(start, end, start_slope, end_slope, amount))

    @classmethod
    def cmyk_linear_interpolate(cls, start: Any, end: Any, amount: float) -> Color:
        return cls(CMYK.linear_interpolate(start, end, amount))

    @classmethod
    def cmyk_cubic_interpolate(cls, start: Any, end: Any, start_slope: float, end_slope: float, amount: float) -> Color:
        return cls(CMYK.cubic_interpolate(start, end, start_slope, end_slope, amount))

    @classmethod
    def hsl_linear_interpolate(cls, start: Any, end: Any, amount: float) -> Color:
        return cls(HSL.linear_interpolate(start, end, amount))

    @classmethod
    def hsl_cubic_interpolate(cls, start: Any, end: Any, start_slope: float, end_slope: float, amount: float) -> Color:
        return cls(HSL.cubic_interpolate(start, end, start_slope, end_slope, amount))

    @classmethod
    def hsv_linear_interpolate(cls, start: Any, end: Any, amount: float) -> Color:
        return cls(HSV.linear_interpolate(start, end, amount))

    @classmethod
    def hsv_cubic_interpolate(cls, start: Any, end: Any, start_slope: float, end_slope: float, amount: float) -> Color:
        return cls(HSV.cubic_interpolate(start, end, start_slope, end_slope, amount))

    @classmethod
    def xyz_linear_interpolate(cls, start: Any, end: Any, amount: float) -> Color:
        return cls(XYZ.linear_interpolate(start, end, amount))

    @classmethod
    def xyz_cubic_interpolate(cls, start: Any, end: Any, start_slope: float, end_slope: float, amount: float) -> Color:
        return cls(XYZ.cubic_interpolate(start, end, start_slope, end_slope, amount))

    @staticmethod
    def rgb_distance(start: Any, end: Any) -> float:
        return RGB.distance(start, end)

    @staticmethod
    def cmyk_distance(start: Any, end: Any) -> float:
        return CMYK.distance(start, end)

    @staticmethod
    def hsl_distance(start: Any, end: Any) -> float:
        return HSL.distance(start, end)

    @staticmethod
    def hsv_distance(start: Any, end: Any) -> float:
        return HSV.distance(start, end)

    @staticmethod
    def xyz_distance(start: Any, end: Any) -> float:
        return XYZ.distance(start, end)
