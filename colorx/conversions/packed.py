"""
Packed color integers.

A packed color stores one 8-bit channel per byte, ``alpha<<24 | red<<16 |
green<<8 | blue``. Values are handled as unsigned 32-bit ints; signed ints
(as stored by platforms with a signed 32-bit color type, e.g. ``-1`` for
opaque white) are accepted on input and normalized.
"""

import numpy as np
from numpy import ndarray as NDArray

from ..types.channel_format import BYTE_MAX, PACKED_MASK, PACKED_SIGNED_MIN
from ..utils.num_utils import unit_to_byte


def normalize_packed(packed: int) -> int:
    """
    Validate a packed color and return it as an unsigned 32-bit int.

    Raises:
        TypeError: If ``packed`` is not an int (bools are rejected)
        ValueError: If ``packed`` does not fit in 32 bits
    """
    if isinstance(packed, bool) or not isinstance(packed, (int, np.integer)):
        raise TypeError(f"Packed color must be an int, got {type(packed).__name__}")
    packed = int(packed)
    if not PACKED_SIGNED_MIN <= packed <= PACKED_MASK:
        raise ValueError(f"Packed color {packed} does not fit in 32 bits")
    return packed & PACKED_MASK


def to_signed(packed: int) -> int:
    """Return the signed 32-bit view of a packed color."""
    packed = normalize_packed(packed)
    return packed - (1 << 32) if packed & 0x80000000 else packed


def _check_byte(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= BYTE_MAX:
        raise ValueError(f"{name} must be in [0, {BYTE_MAX}], got {value}")
    return int(value)


def pack_argb(alpha: int, red: int, green: int, blue: int) -> int:
    """Pack four 8-bit channels into a color int."""
    return (
        _check_byte("alpha", alpha) << 24
        | _check_byte("red", red) << 16
        | _check_byte("green", green) << 8
        | _check_byte("blue", blue)
    )


def unpack_argb(packed: int) -> tuple[int, int, int, int]:
    """Split a color int into its (alpha, red, green, blue) bytes."""
    packed = normalize_packed(packed)
    return (packed >> 24) & 0xFF, (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


def alpha(packed: int) -> int:
    return unpack_argb(packed)[0]


def red(packed: int) -> int:
    return unpack_argb(packed)[1]


def green(packed: int) -> int:
    return unpack_argb(packed)[2]


def blue(packed: int) -> int:
    return unpack_argb(packed)[3]


def with_alpha(packed: int, alpha_byte: int) -> int:
    """Replace the alpha byte of a color int."""
    packed = normalize_packed(packed)
    return (_check_byte("alpha", alpha_byte) << 24) | (packed & 0x00FFFFFF)


def packed_to_unit_rgb(packed: int) -> tuple[float, float, float]:
    """Return the red, green and blue channels of a color int scaled to [0, 1]."""
    _, r, g, b = unpack_argb(packed)
    return r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX


def unit_rgb_to_packed(r: float, g: float, b: float, alpha_byte: int = BYTE_MAX) -> int:
    """Pack unit RGB floats, rounding each channel half up to the nearest byte."""
    return pack_argb(alpha_byte, unit_to_byte(r), unit_to_byte(g), unit_to_byte(b))


def np_unit_rgb_to_packed(rgb: NDArray, alpha_byte: int = BYTE_MAX) -> NDArray:
    """
    Vectorized: Pack unit RGB rows into color ints.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 1]
        alpha_byte: Alpha byte shared by every packed color

    Returns:
        int64 array of shape (...) holding unsigned 32-bit packed colors
    """
    _check_byte("alpha", alpha_byte)
    rgb = np.asarray(rgb, dtype=float)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {rgb.shape}")

    channels = np.clip(np.floor(rgb * float(BYTE_MAX) + 0.5), 0, BYTE_MAX).astype(np.int64)
    return (
        (np.int64(alpha_byte) << 24)
        | (channels[..., 0] << 16)
        | (channels[..., 1] << 8)
        | channels[..., 2]
    )
