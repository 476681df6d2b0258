# No dependencies beyond numpy
import numpy as np

OCTET_MAX = 255
HUE_PERIOD = 360.0
HUE_SECTOR = 60.0

FLOAT_EPSILON = float(np.finfo(np.float64).eps)
FLOAT_TINY = float(np.finfo(np.float64).tiny)
FLOAT_MAX = float(np.finfo(np.float64).max)

# sRGB (D65) linear transforms; ratios are treated as already linear.
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_SRGB = np.array([
    [ 3.2404542, -1.5371385, -0.4985314],
    [-0.9692660,  1.8760108,  0.0415560],
    [ 0.0556434, -0.2040259,  1.0572252],
])
