from typing import Any, ClassVar, Self, Tuple
from ..conversions.hex import format_hex, parse_hex
from ..conversions.packed import with_alpha as packed_with_alpha
from ..types.channel_format import HexStyle
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class ColorHEX(ColorBase):
    """
    A color held as its hex string.

    Accepts ``#RRGGBB`` or ``#AARRGGBB`` in any case and stores the canonical
    uppercase ``#AARRGGBB`` form; ``#RRGGBB`` input is fully opaque.

    >>> ColorHEX("#e91e63").hex
    '#FFE91E63'
    >>> ColorHEX("#e91e63").pure_value
    'FFE91E63'
    """
    num_channels:  ClassVar[int] = 1
    mode:          ClassVar[ColorSpace] = "hex"
    _type:         ClassVar[type] = str
    channel_names: ClassVar[Tuple[str]] = ("hex",)
    maxima:        ClassVar[Tuple[str]] = ("#FFFFFFFF",)
    alpha_max:     ClassVar[int] = 255

    def _coerce(self, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        # parse_hex raises TypeError / HexFormatError for bad input
        return (format_hex(parse_hex(value[0])),)

    @property
    def hex(self) -> str:
        return self.channels[0]

    @property
    def pure_value(self) -> str:
        """The hex digits without the leading ``#``."""
        return self.hex[1:]

    @property
    def alpha(self) -> int:
        """Alpha byte, 0..255."""
        return int(self.hex[1:3], 16)

    def with_alpha(self, alpha: int) -> Self:
        a = max(0, min(int(alpha), self.alpha_max))
        return self.from_packed(packed_with_alpha(self.to_packed(), a))

    def format(self, style: HexStyle = HexStyle.ARGB) -> str:
        """Render as ``#AARRGGBB`` or, with ``HexStyle.RGB``, ``#RRGGBB``."""
        return format_hex(self.to_packed(), style)

    def __str__(self) -> str:
        return self.hex


HEX = ColorHEX
