"""
Tincture Color Space Conversions
================================

Pure scalar conversion formulas between RGB ratios and the other color
spaces. Every conversion pivots through RGB: there is no direct formula
between two non-RGB spaces.

RGB → X:
    unit_rgb_to_cmyk(r, g, b)
    unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_hsv(r, g, b)
    unit_rgb_to_xyz(r, g, b)

X → RGB:
    cmyk_to_unit_rgb(c, m, y, k)
    hsl_to_unit_rgb(h, s, l)
    hsv_to_unit_rgb(h, s, v)
    xyz_to_unit_rgb(x, y, z)   (unclamped; out-of-gamut ratios are possible)

Hex codes:
    parse_hex_code("#RRGGBB" | "#RGB") -> 0xRRGGBB
    format_hex_code(value, num_octets=3, upper=False)

High-Level API
--------------
    convert(color, from_space, to_space)
        Convert a component tuple between any two spaces

Examples
--------
>>> from tincture.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> unit_rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> hsl_to_unit_rgb(120.0, 1.0, 0.5)
(0.0, 1.0, 0.0)
>>> convert((255, 0, 0), "rgb", "cmyk")
(0, 255, 255, 0)
"""

from .to_cmyk import unit_rgb_to_cmyk
from .to_hsl import unit_rgb_to_hsl
from .to_hsv import unit_rgb_to_hsv
from .to_xyz import unit_rgb_to_xyz
from .to_rgb import (
    cmyk_to_unit_rgb,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    xyz_to_unit_rgb,
)
from .hex_codes import parse_hex_code, format_hex_code, expand_shorthand
from .wrapper import convert

__all__ = [
    # RGB → X
    'unit_rgb_to_cmyk',
    'unit_rgb_to_hsl',
    'unit_rgb_to_hsv',
    'unit_rgb_to_xyz',

    # X → RGB
    'cmyk_to_unit_rgb',
    'hsl_to_unit_rgb',
    'hsv_to_unit_rgb',
    'xyz_to_unit_rgb',

    # Hex codes
    'parse_hex_code',
    'format_hex_code',
    'expand_shorthand',

    # High-level API
    'convert',
]
