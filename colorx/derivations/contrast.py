from ..conversions.packed import normalize_packed, unpack_argb
from ..types.channel_format import (
    BYTE_MAX,
    DARK_LUMINANCE_THRESHOLD,
    LUMA_B,
    LUMA_G,
    LUMA_R,
    PACKED_BLACK,
    PACKED_WHITE,
    SRGB_DIVISOR,
    SRGB_GAMMA,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
    SRGB_SLOPE,
)


def srgb_to_linear(channel: int) -> float:
    """Linearize an 8-bit sRGB channel."""
    c = channel / BYTE_MAX
    if c <= SRGB_LINEAR_THRESHOLD:
        return c / SRGB_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA


def relative_luminance(packed: int) -> float:
    """Relative luminance (the Y of XYZ) of a packed color, in [0, 1]. Alpha is ignored."""
    _, r, g, b = unpack_argb(packed)
    return LUMA_R * srgb_to_linear(r) + LUMA_G * srgb_to_linear(g) + LUMA_B * srgb_to_linear(b)


def is_dark(packed: int) -> bool:
    return relative_luminance(packed) < DARK_LUMINANCE_THRESHOLD


def contrasting(packed: int, light: int = PACKED_WHITE, dark: int = PACKED_BLACK) -> int:
    """
    Pick a color that reads well on top of ``packed``.

    Returns ``light`` for dark colors and ``dark`` otherwise.
    """
    light = normalize_packed(light)
    dark = normalize_packed(dark)
    return light if is_dark(packed) else dark
