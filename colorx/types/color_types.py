from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ChannelValue = Union[ScalarVector, str]
PackedColor = int
ColorSpace = Literal["rgb", "argb", "hex", "hsl", "hsla", "hsv", "cmyk"]

COLOR_SPACES: Tuple[ColorSpace, ...] = ("rgb", "argb", "hex", "hsl", "hsla", "hsv", "cmyk")
HUE_SPACES = {"hsl", "hsla", "hsv"}
ALPHA_SPACES = {"argb", "hex", "hsla"}


def normalize_space(color_space: str) -> ColorSpace:
    """
    Validate a color space name and return its canonical lowercase form.

    Args:
        color_space: Color space string, case-insensitive

    Returns:
        Lowercase color space name

    Raises:
        ValueError: If the name is not one of COLOR_SPACES
    """
    if not isinstance(color_space, str):
        raise TypeError(f"Color space must be a string, got {type(color_space).__name__}")
    space = color_space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown color space: {color_space!r}")
    return space  # type: ignore[return-value]


def is_hue_space(color_space: ColorSpace) -> bool:
    """
    Check if the given color space is a hue-based space (HSL, HSLA or HSV).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES


def has_alpha_channel(color_space: ColorSpace) -> bool:
    """Check if the given color space carries an alpha channel."""
    return color_space.lower() in ALPHA_SPACES
