from .color_types import (
    ColorSpace,
    PackedColor,
    COLOR_SPACES,
    HUE_SPACES,
    ALPHA_SPACES,
    normalize_space,
    is_hue_space,
    has_alpha_channel,
)
from .channel_format import HexStyle

__all__ = [
    "ColorSpace",
    "PackedColor",
    "COLOR_SPACES",
    "HUE_SPACES",
    "ALPHA_SPACES",
    "normalize_space",
    "is_hue_space",
    "has_alpha_channel",
    "HexStyle",
]
