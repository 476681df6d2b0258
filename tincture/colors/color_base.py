from __future__ import annotations
import math
from functools import total_ordering
from typing import Any, Callable, ClassVar, Dict, Tuple, TypeVar

from ..types.color_types import ColorSpace, ColorSpaceName, Scalar, is_hue_space
from ..types.constants import OCTET_MAX
from ..utils.interpolation import cerp_f32, cerp_u8, lerp_f32, lerp_u8
from ..utils.num_utils import clamped, normalize_hue, octet_to_ratio, unit_clamp

C = TypeVar('C', bound='ColorBase')


@total_ordering
class ColorBase:
    """
    Immutable color value in one color space.

    Subclasses declare their channel names and how raw components are
    normalized; every construction path (``__init__``, ``with_*`` setters,
    conversions) goes through ``_normalize`` so the invariants of a space
    cannot be bypassed.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int]
    mode:       ClassVar[ColorSpace]
    channels:   ClassVar[Tuple[str, ...]]
    null_value: ClassVar[Tuple[Scalar, ...]]
    _lerp:      ClassVar[Callable[[Any, Any, float], Any]]
    _cerp:      ClassVar[Callable[[Any, Any, float, float, float], Any]]
    # def color_convert(self: ColorBase, to_space: ColorSpaceName) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpaceName], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *components: Scalar) -> None:
        if len(components) != self.num_channels:
            raise ValueError(
                f"{self.mode.value} expects {self.num_channels} components "
                f"{self.channels!r}, got {len(components)}"
            )
        # safe assignment; __setattr__ still allows it during init
        self._value = self._normalize(components)

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _normalize(cls, components: Tuple[Scalar, ...]) -> Tuple[Scalar, ...]:
        raise NotImplementedError

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __reduce__(self):
        return (self.__class__, self._value)

    def _replace(self: C, **changes: Scalar) -> C:
        """Return a new value with some components replaced and re-normalized."""
        unknown = set(changes) - set(self.channels)
        if unknown:
            raise TypeError(f"{self.__class__.__name__} has no components {sorted(unknown)}")
        values = dict(zip(self.channels, self._value))
        values.update(changes)
        return self.__class__(*(values[name] for name in self.channels))

    # ------------------ CONVERSION CAPABILITY ------------------
    def to_rgb(self):
        """Convert to the RGB hub representation."""
        raise NotImplementedError

    @classmethod
    def from_rgb(cls: type[C], rgb) -> C:
        """Build a value of this space from an RGB value."""
        raise NotImplementedError

    @classmethod
    def from_color(cls: type[C], color: Any) -> C:
        """
        Coerce any color value into this space, pivoting through RGB.

        Values already in this space are returned unchanged.
        """
        if isinstance(color, cls):
            return color
        to_rgb = getattr(color, 'to_rgb', None)
        if not callable(to_rgb):
            raise TypeError(f"Cannot convert {type(color).__name__} to {cls.__name__}")
        return cls.from_rgb(to_rgb())

    # ------------------ SERIALIZATION ------------------
    def as_dict(self) -> Dict[str, Any]:
        """Structural encoding: the space name plus every named component."""
        data: Dict[str, Any] = {"space": self.mode.value}
        data.update(zip(self.channels, self._value))
        return data

    # ------------------ BINARY OPERATIONS ------------------
    @classmethod
    def linear_interpolate(cls: type[C], start: Any, end: Any, amount: float) -> C:
        """Per-component linear interpolation; operands may be any color space."""
        s = cls.from_color(start)
        e = cls.from_color(end)
        return cls(*(cls._lerp(a, b, amount) for a, b in zip(s.value, e.value)))

    @classmethod
    def cubic_interpolate(
        cls: type[C],
        start: Any,
        end: Any,
        start_slope: float,
        end_slope: float,
        amount: float,
    ) -> C:
        """Per-component cubic Hermite interpolation with shared slopes."""
        s = cls.from_color(start)
        e = cls.from_color(end)
        return cls(*(
            cls._cerp(a, b, start_slope, end_slope, amount)
            for a, b in zip(s.value, e.value)
        ))

    @classmethod
    def distance(cls, start: Any, end: Any) -> float:
        """Euclidean distance over all components."""
        s = cls.from_color(start)
        e = cls.from_color(end)
        return math.sqrt(sum(float(a - b) ** 2 for a, b in zip(s.value, e.value)))


class OctetColor(ColorBase):
    """Color space made of 8-bit channels (RGB, CMYK)."""
    __slots__ = ()

    _lerp = staticmethod(lerp_u8)
    _cerp = staticmethod(cerp_u8)

    @classmethod
    def _normalize(cls, components: Tuple[Scalar, ...]) -> Tuple[int, ...]:
        return tuple(int(clamped(int(v), 0, OCTET_MAX)) for v in components)

    def octets(self) -> Tuple[int, ...]:
        return self._value

    def ratios(self) -> Tuple[float, ...]:
        return tuple(octet_to_ratio(v) for v in self._value)

    def hex(self) -> int:
        """Pack the channels big-endian, one octet each."""
        packed = 0
        for v in self._value:
            packed = packed << 8 | v
        return packed

    @classmethod
    def _unpack(cls, packed: int) -> Tuple[int, ...]:
        shifts = range(8 * (cls.num_channels - 1), -1, -8)
        return tuple((packed >> shift) & 0xFF for shift in shifts)


class UnitFloatColor(ColorBase):
    """Color space made of independent floats clamped to [0, 1] (XYZ)."""
    __slots__ = ()

    _lerp = staticmethod(lerp_f32)
    _cerp = staticmethod(cerp_f32)

    @classmethod
    def _normalize(cls, components: Tuple[Scalar, ...]) -> Tuple[float, ...]:
        return tuple(unit_clamp(v) for v in components)

    def components(self) -> Tuple[float, ...]:
        return self._value


class HueColor(ColorBase):
    """
    Cylindrical color space: hue in degrees plus two unit components (HSL, HSV).

    Hue is wrapped into [0, 360) and must be finite; the other two components
    are clamped into [0, 1].
    """
    __slots__ = ()

    _lerp = staticmethod(lerp_f32)
    _cerp = staticmethod(cerp_f32)

    @classmethod
    def _normalize(cls, components: Tuple[Scalar, ...]) -> Tuple[float, ...]:
        h, a, b = components
        return normalize_hue(h), unit_clamp(a), unit_clamp(b)

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    h = hue
    s = saturation

    def with_hue(self: C, hue: float) -> C:
        return self._replace(h=hue)

    def with_saturation(self: C, saturation: float) -> C:
        return self._replace(s=saturation)

    def components(self) -> Tuple[float, ...]:
        return self._value

    @classmethod
    def distance(cls, start: Any, end: Any) -> float:
        """
        Heuristic perceptual distance.

        Hue and the third component form a point on a circle of radius
        ``2 * third`` and saturation is a third axis; the Euclidean distance
        in that embedding is divided by ``sqrt(6)``. Hue is converted from
        degrees to radians before taking sin and cos.
        """
        s = cls.from_color(start)
        e = cls.from_color(end)
        sh, ss, sr = s.value
        eh, es, er = e.value

        x = 2.0 * (sr * math.sin(math.radians(sh)) - er * math.sin(math.radians(eh)))
        y = 2.0 * (sr * math.cos(math.radians(sh)) - er * math.cos(math.radians(eh)))
        d = ss - es

        return math.sqrt(d * d + x * x + y * y) / math.sqrt(6.0)
