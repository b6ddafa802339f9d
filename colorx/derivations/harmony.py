import warnings
from typing import Tuple

from ..conversions.numbers import wrap_hue
from ..conversions.wrapper import channels_to_packed, packed_to_channels
from ..types.channel_format import (
    ANALOGOUS_OFFSETS,
    COMPLEMENTARY_OFFSET,
    TETRADIC_OFFSETS,
    TRIADIC_OFFSETS,
)


def rotate_hue(packed: int, degrees: float) -> int:
    """Rotate the HSL hue of a packed color, keeping saturation, lightness and alpha."""
    h, s, l, a = packed_to_channels(packed, "hsla")
    return channels_to_packed((wrap_hue(h + degrees), s, l, a), "hsla")


def complementary(packed: int) -> int:
    """The color opposite on the hue wheel: (hue + 180) mod 360."""
    return rotate_hue(packed, COMPLEMENTARY_OFFSET)


def complimentary(packed: int) -> int:
    """
    Deprecated spelling of :func:`complementary`.
    """
    warnings.warn(
        "complimentary is deprecated. Use complementary instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    return complementary(packed)


def triadic(packed: int) -> Tuple[int, int]:
    """The two colors completing an equilateral triangle: hue + 120 and hue + 240."""
    first, second = (rotate_hue(packed, offset) for offset in TRIADIC_OFFSETS)
    return first, second


def tetradic(packed: int) -> Tuple[int, int, int]:
    """The three colors completing a square: hue + 90, hue + 180 and hue + 270."""
    first, second, third = (rotate_hue(packed, offset) for offset in TETRADIC_OFFSETS)
    return first, second, third


def analogous(packed: int) -> Tuple[int, int]:
    """The neighbours 30 degrees either side: hue + 30, then hue - 30."""
    first, second = (rotate_hue(packed, offset) for offset in ANALOGOUS_OFFSETS)
    return first, second
