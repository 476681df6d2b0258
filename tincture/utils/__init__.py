from .num_utils import (
    clamped,
    distance,
    nearly_equal,
    normalize_hue,
    ratio_to_octet,
    octet_to_ratio,
    unit_clamp,
)
from .interpolation import lerp_u8, lerp_f32, cerp_f32, cerp_u8

__all__ = [
    "clamped",
    "distance",
    "nearly_equal",
    "normalize_hue",
    "ratio_to_octet",
    "octet_to_ratio",
    "unit_clamp",
    "lerp_u8",
    "lerp_f32",
    "cerp_f32",
    "cerp_u8",
]
