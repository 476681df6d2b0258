"""
Tincture - Color Model Conversion Library
=========================================

Represents a single color value in RGB, CMYK, HSL, HSV and CIE XYZ, with
conversions between every pair of spaces (always pivoting through RGB),
component-wise linear and cubic interpolation, and distance metrics.

Key Features
------------
- Immutable, hashable color values with per-space normalization
- Hex codes: ``#RGB`` / ``#RRGGBB`` parsing, ``0xRRGGBB`` / ``0xCCMMYYKK`` packing
- Interpolation and distance functions that accept operands in any space
- A ``Color`` facade with getters, ``with_*`` setters and adjustments
  (hue shift, saturate, lighten, ...)

Quick Start
-----------
>>> from tincture import RGB, HSL, Color
>>>
>>> lime = RGB.from_hex_code("#0f0")
>>> lime.convert("hsl")
HSL(h=120.0, s=1.0, l=0.5)
>>> lime.convert("cmyk")
CMYK(c=255, m=0, y=255, k=0)
>>>
>>> Color(lime).darken(0.5).rgb_octets()
(0, 128, 0)

Modules
-------
- colors: value types for each color space
- conversions: scalar conversion formulas and hex codecs
- color: the Color facade
- utils: clamping and interpolation primitives
- errors: exception hierarchy
"""

from .colors.color_base import ColorBase
from .colors.rgb import RGB
from .colors.cmyk import CMYK
from .colors.hsl import HSL
from .colors.hsv import HSV
from .colors.xyz import XYZ
from .colors.color import color_convert, from_dict, get_color_class
from .color import Color

from .conversions import (
    unit_rgb_to_cmyk,
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    unit_rgb_to_xyz,
    cmyk_to_unit_rgb,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    xyz_to_unit_rgb,
    parse_hex_code,
    format_hex_code,
    convert,
)
from .types.color_types import ColorSpace
from .utils import clamped, distance, lerp_u8, lerp_f32, cerp_f32, cerp_u8
from .errors import (
    TinctureError,
    HexCodeParseError,
    UnsupportedColorSpaceError,
    InvariantViolation,
)

__version__ = "1.0.0"

__all__ = [
    # core color types
    "ColorBase",
    "RGB",
    "CMYK",
    "HSL",
    "HSV",
    "XYZ",
    "Color",
    "color_convert",
    "from_dict",
    "get_color_class",
    # conversions
    "unit_rgb_to_cmyk",
    "unit_rgb_to_hsl",
    "unit_rgb_to_hsv",
    "unit_rgb_to_xyz",
    "cmyk_to_unit_rgb",
    "hsl_to_unit_rgb",
    "hsv_to_unit_rgb",
    "xyz_to_unit_rgb",
    "parse_hex_code",
    "format_hex_code",
    "convert",
    "ColorSpace",
    # scalar utilities
    "clamped",
    "distance",
    "lerp_u8",
    "lerp_f32",
    "cerp_f32",
    "cerp_u8",
    # errors
    "TinctureError",
    "HexCodeParseError",
    "UnsupportedColorSpaceError",
    "InvariantViolation",
    # Version
    "__version__",
]
