"""
Tincture Color Classes
======================

Immutable value types for the RGB, CMYK, HSL, HSV and XYZ color spaces.

Features
--------
- Immutable color instances (frozen after initialization)
- Value normalization on every construction path: octets clamped to
  [0, 255], hue wrapped into [0, 360), unit components clamped to [0, 1]
- Conversion between every pair of spaces, pivoting through RGB
- Linear/cubic interpolation and distance per space, accepting operands in
  any space

Usage
-----
>>> from tincture.colors import RGB, HSL
>>>
>>> red = RGB(255, 0, 0)
>>> hsl = red.convert("hsl")
>>> print(hsl)  # HSL(h=0.0, s=1.0, l=0.5)
>>>
>>> # "Setters" return new values
>>> darker = hsl.with_lightness(0.25)
>>> darker.to_rgb()
RGB(r=128, g=0, b=0)
>>>
>>> # Interpolate in HSL between an RGB and an HSL operand
>>> HSL.linear_interpolate(red, HSL(120.0, 1.0, 0.5), 0.5)
HSL(h=60.0, s=1.0, l=0.5)

Color Classes
-------------
    - RGB:  r, g, b        ints 0-255 (hub space)
    - CMYK: c, m, y, k     ints 0-255
    - HSL:  h, s, l        hue degrees, unit floats
    - HSV:  h, s, v        hue degrees, unit floats
    - XYZ:  x, y, z        unit floats

Notes
-----
- CMYK, HSL and HSV hold more states than 24-bit RGB: a component set on
  them may not survive a round trip through RGB.
- Grayscale RGB maps to hue 0 and saturation 0; black maps to CMYK
  (0, 0, 0, 255).
"""

from .color_base import ColorBase
from .rgb import RGB
from .cmyk import CMYK
from .hsl import HSL
from .hsv import HSV
from .xyz import XYZ
from .color import color_convert, from_dict, get_color_class, space_to_class


__all__ = [
    'ColorBase',
    'RGB',
    'CMYK',
    'HSL',
    'HSV',
    'XYZ',
    'color_convert',
    'from_dict',
    'get_color_class',
    'space_to_class',
]
