import numpy as np
from numpy import ndarray as NDArray

from ..types.channel_format import HUE_360
from .hue import rgb_hue, np_rgb_hue
from .numbers import clamp01, wrap_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Args:
        r: Red in [0, 1]
        g: Green in [0, 1]
        b: Blue in [0, 1]

    Returns:
        Tuple[float, float, float]: (h, s, l) with h in [0, 360), s and l in [0, 1]
    """
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    lightness = (cmax + cmin) / 2.0

    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (1.0 - abs(2.0 * lightness - 1.0))

    return rgb_hue(r, g, b, cmax, delta), clamp01(saturation), clamp01(lightness)


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSL.

    Returns:
        hsl: array of shape (..., 3)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    cmax = np.maximum(np.maximum(r, g), b)
    cmin = np.minimum(np.minimum(r, g), b)
    delta = cmax - cmin
    lightness = (cmax + cmin) / 2.0

    denom = 1.0 - np.abs(2.0 * lightness - 1.0)
    safe_denom = np.where(delta == 0, 1.0, denom)
    saturation = np.where(delta == 0, 0.0, delta / safe_denom)

    h = np_rgb_hue(r, g, b, cmax, delta)
    return np.stack([h, np.clip(saturation, 0.0, 1.0), np.clip(lightness, 0.0, 1.0)], axis=-1)


def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV to HSL without leaving the float domain."""
    lightness = v * (1.0 - s / 2.0)
    if lightness == 0.0 or lightness == 1.0:
        saturation = 0.0
    else:
        saturation = (v - lightness) / min(lightness, 1.0 - lightness)
    return wrap_hue(h), clamp01(saturation), clamp01(lightness)


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to HSL."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    lightness = v * (1.0 - s / 2.0)
    edge = (lightness == 0.0) | (lightness == 1.0)
    denom = np.where(edge, 1.0, np.minimum(lightness, 1.0 - lightness))
    saturation = np.where(edge, 0.0, (v - lightness) / denom)
    return np.stack([np.mod(h, HUE_360), np.clip(saturation, 0.0, 1.0), np.clip(lightness, 0.0, 1.0)], axis=-1)
