from typing import Tuple

from ..types.color_types import ColorElement, ColorSpaceName, to_color_space


def convert(
    color: ColorElement,
    from_space: ColorSpaceName,
    to_space: ColorSpaceName,
) -> Tuple:
    """
    Convert raw components between color spaces, pivoting through RGB.

    Args:
        color: Components in ``from_space`` order, e.g. ``(h, s, l)``
        from_space: Source color space name
        to_space: Target color space name

    Returns:
        Components of the converted color as a tuple
    """
    # local import to avoid cycles: colors depend on the formulas in this package
    from ..colors.color import get_color_class

    source = get_color_class(to_color_space(from_space))(*color)
    return source.convert(to_space).value
