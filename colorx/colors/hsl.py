from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, channel_property, format_unit_channels


class ColorHSL(ColorBase):
    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = "hsl"
    _type:         ClassVar[type] = float
    channel_names: ClassVar[Tuple[str, str, str]] = ("hue", "saturation", "lightness")
    maxima:        ClassVar[Tuple[float, float, float]] = (360.0, 1.0, 1.0)

    hue = channel_property(0, "Hue in degrees, [0, 360)")
    saturation = channel_property(1)
    lightness = channel_property(2)

    def __str__(self) -> str:
        return format_unit_channels(self.channels, hue=True)


class ColorHSLA(ColorBase, WithAlpha):
    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = "hsla"
    _type:         ClassVar[type] = float
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("hue", "saturation", "lightness", "alpha")
    maxima:        ClassVar[Tuple[float, float, float, float]] = (360.0, 1.0, 1.0, 1.0)
    alpha_index:   ClassVar[int] = 3
    alpha_max:     ClassVar[float] = 1.0

    hue = channel_property(0, "Hue in degrees, [0, 360)")
    saturation = channel_property(1)
    lightness = channel_property(2)

    def __str__(self) -> str:
        return format_unit_channels(self.channels, hue=True)


HSL = ColorHSL
HSLA = ColorHSLA
