from .color_types import ColorSpace, HUE_SPACES, is_hue_space, to_color_space

__all__ = ["ColorSpace", "HUE_SPACES", "is_hue_space", "to_color_space"]
