from typing import Any, ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel_property, format_unit_channels


class ColorCMYK(ColorBase):
    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = "cmyk"
    _type:         ClassVar[type] = float
    channel_names: ClassVar[Tuple[str, str, str, str]] = ("cyan", "magenta", "yellow", "key")
    maxima:        ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)

    cyan = channel_property(0)
    magenta = channel_property(1)
    yellow = channel_property(2)
    key = channel_property(3, "Black ink; at 1.0 the other inks are zero")

    def _coerce(self, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        c, m, y, k = super()._coerce(value)
        if k >= 1.0:
            return (0.0, 0.0, 0.0, 1.0)
        return (c, m, y, k)

    def __str__(self) -> str:
        return format_unit_channels(self.channels)


CMYK = ColorCMYK
