import numpy as np
from numpy import ndarray as NDArray

from ..types.channel_format import HUE_360, HUE_SECTOR
from .hue import segment_channels, np_segment_channels
from .numbers import clamp01, wrap_hue


## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to unit RGB using the six-sector chroma reconstruction.

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b), each clamped to [0, 1]
    """
    h = wrap_hue(h)
    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    m = l - chroma / 2.0
    x = chroma * (1.0 - abs((h / HUE_SECTOR) % 2.0 - 1.0))

    r, g, b = segment_channels(h, chroma, x)
    return clamp01(r + m), clamp01(g + m), clamp01(b + m)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to unit RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(np.mod(h, HUE_360), out_shape)
    h = np.where(h >= HUE_360, 0.0, h)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    m = l - chroma / 2.0
    x = chroma * (1.0 - np.abs(np.mod(h / HUE_SECTOR, 2.0) - 1.0))

    r, g, b = np_segment_channels(h, chroma, x)
    return np.clip(np.stack([r + m, g + m, b + m], axis=-1), 0.0, 1.0)


## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to unit RGB.

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b), each clamped to [0, 1]
    """
    h = wrap_hue(h)
    chroma = v * s
    m = v - chroma
    x = chroma * (1.0 - abs((h / HUE_SECTOR) % 2.0 - 1.0))

    r, g, b = segment_channels(h, chroma, x)
    return clamp01(r + m), clamp01(g + m), clamp01(b + m)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to unit RGB, returning an array of shape (..., 3)."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(np.mod(h, HUE_360), out_shape)
    h = np.where(h >= HUE_360, 0.0, h)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    chroma = v * s
    m = v - chroma
    x = chroma * (1.0 - np.abs(np.mod(h / HUE_SECTOR, 2.0) - 1.0))

    r, g, b = np_segment_channels(h, chroma, x)
    return np.clip(np.stack([r + m, g + m, b + m], axis=-1), 0.0, 1.0)
