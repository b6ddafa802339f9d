from __future__ import annotations
from numbers import Integral
from typing import Dict, Union

from .color_base import ColorBase
from .rgb import ColorRGB, ColorARGB
from .hex import ColorHEX
from .hsl import ColorHSL, ColorHSLA
from .hsv import ColorHSV
from .cmyk import ColorCMYK
from ..conversions import convert
from ..types.color_types import ColorSpace, normalize_space

unified_space_to_class: Dict[str, type[ColorBase]] = {
    "rgb": ColorRGB,
    "argb": ColorARGB,
    "hex": ColorHEX,
    "hsl": ColorHSL,
    "hsla": ColorHSLA,
    "hsv": ColorHSV,
    "cmyk": ColorCMYK,
}


def get_color_class(color_space: ColorSpace) -> type[ColorBase]:
    """Return the class representing ``color_space`` (case-insensitive)."""
    return unified_space_to_class[normalize_space(color_space)]


def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Args:
        to_space: Target color space ("rgb", "argb", "hex", "hsl", "hsla", "hsv", "cmyk").
            Defaults to the current space.

    Returns:
        New ColorBase instance in the target space
    """
    to_space = normalize_space(to_space or self.mode)
    result = convert(self.channels, self.mode, to_space)
    cls = unified_space_to_class[to_space]
    return cls(result)


def convert_color(value: Union[int, ColorBase], to_space: ColorSpace) -> ColorBase:
    """
    Convert a packed color int or a color instance into ``to_space``.

    >>> convert_color(0xFFE91E63, "rgb")
    ColorRGB(233, 30, 99)
    """
    color_class = get_color_class(to_space)
    if isinstance(value, ColorBase):
        return value.convert(to_space)
    if isinstance(value, Integral) and not isinstance(value, bool):
        return color_class.from_packed(int(value))
    raise TypeError(f"Expected a packed color int or a color instance, got {type(value).__name__}")


def _as_space(space: str):
    def as_space(self: ColorBase) -> ColorBase:
        return self.convert(space)
    as_space.__name__ = f"as_{space}"
    as_space.__doc__ = f"Shorthand for ``convert({space!r})``."
    return as_space


ColorBase.convert = color_convert
for _space in unified_space_to_class:
    setattr(ColorBase, f"as_{_space}", _as_space(_space))
