import numpy as np
from numpy import ndarray as NDArray

from ..types.channel_format import HUE_360
from .hue import rgb_hue, np_rgb_hue
from .numbers import clamp01, wrap_hue


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Args:
        r: Red in [0, 1]
        g: Green in [0, 1]
        b: Blue in [0, 1]

    Returns:
        Tuple[float, float, float]: (h, s, v) with h in [0, 360), s and v in [0, 1]
    """
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    saturation = 0.0 if cmax == 0 else delta / cmax
    return rgb_hue(r, g, b, cmax, delta), clamp01(saturation), clamp01(cmax)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSV.

    Returns:
        hsv: array of shape (..., 3)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    cmax = np.maximum(np.maximum(r, g), b)
    cmin = np.minimum(np.minimum(r, g), b)
    delta = cmax - cmin
    safe_max = np.where(cmax == 0, 1.0, cmax)
    saturation = np.where(cmax == 0, 0.0, delta / safe_max)

    h = np_rgb_hue(r, g, b, cmax, delta)
    return np.stack([h, np.clip(saturation, 0.0, 1.0), np.clip(cmax, 0.0, 1.0)], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL to HSV without leaving the float domain."""
    value = l + s * min(l, 1.0 - l)
    saturation = 0.0 if value == 0.0 else 2.0 * (1.0 - l / value)
    return wrap_hue(h), clamp01(saturation), clamp01(value)


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL to HSV."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    value = l + s * np.minimum(l, 1.0 - l)
    safe_value = np.where(value == 0.0, 1.0, value)
    saturation = np.where(value == 0.0, 0.0, 2.0 * (1.0 - l / safe_value))
    return np.stack([np.mod(h, HUE_360), np.clip(saturation, 0.0, 1.0), np.clip(value, 0.0, 1.0)], axis=-1)
