from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, channel_property


class ColorRGB(ColorBase):
    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = "rgb"
    _type:         ClassVar[type] = int
    channel_names: ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")
    maxima:        ClassVar[Tuple[int, int, int]] = (255, 255, 255)

    red = channel_property(0)
    green = channel_property(1)
    blue = channel_property(2)


class ColorARGB(ColorBase, WithAlpha):
    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = "argb"
    _type:         ClassVar[type] = int
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("alpha", "red", "green", "blue")
    maxima:        ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    alpha_index:   ClassVar[int] = 0
    alpha_max:     ClassVar[int] = 255

    red = channel_property(1)
    green = channel_property(2)
    blue = channel_property(3)


RGB = ColorRGB
ARGB = ColorARGB
