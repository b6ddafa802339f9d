from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel_property, format_unit_channels


class ColorHSV(ColorBase):
    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = "hsv"
    _type:         ClassVar[type] = float
    channel_names: ClassVar[Tuple[str, str, str]] = ("hue", "saturation", "value")
    maxima:        ClassVar[Tuple[float, float, float]] = (360.0, 1.0, 1.0)

    hue = channel_property(0, "Hue in degrees, [0, 360)")
    saturation = channel_property(1)
    value = channel_property(2, "Brightness, the largest RGB channel in [0, 1]")

    def __str__(self) -> str:
        return format_unit_channels(self.channels, hue=True)


HSV = ColorHSV
