import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.channel_format import HUE_360, HUE_SECTOR
from .numbers import wrap_hue


def rgb_hue(r: float, g: float, b: float, cmax: float, delta: float) -> float:
    """
    Hue in degrees of a unit RGB triple, given its max channel and chroma.

    The max channel is resolved in red, green, blue order so ties between
    channels always pick the same sector.
    """
    if delta == 0:
        return 0.0
    if cmax == r:
        h = ((g - b) / delta) % 6.0
    elif cmax == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    return wrap_hue(h * HUE_SECTOR)


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray, cmax: NDArray, delta: NDArray) -> NDArray:
    """Vectorized: hue in degrees for unit RGB arrays."""
    achromatic = delta == 0
    safe_delta = np.where(achromatic, 1.0, delta)

    h = np.where(
        cmax == r,
        np.mod((g - b) / safe_delta, 6.0),
        np.where(cmax == g, (b - r) / safe_delta + 2.0, (r - g) / safe_delta + 4.0),
    )
    h = np.mod(h * HUE_SECTOR, HUE_360)
    h = np.where(h >= HUE_360, 0.0, h)
    return np.where(achromatic, 0.0, h)


def segment_channels(hue: float, chroma: float, x: float) -> tuple[float, float, float]:
    """Pick the (r, g, b) chroma arrangement for the 60 degree sector containing ``hue``."""
    sector = min(math.floor(hue / HUE_SECTOR), 5)
    if sector == 0:
        return chroma, x, 0.0
    if sector == 1:
        return x, chroma, 0.0
    if sector == 2:
        return 0.0, chroma, x
    if sector == 3:
        return 0.0, x, chroma
    if sector == 4:
        return x, 0.0, chroma
    return chroma, 0.0, x


def np_segment_channels(hue: NDArray, chroma: NDArray, x: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    """Vectorized counterpart of :func:`segment_channels`."""
    sector = np.minimum(np.floor(hue / HUE_SECTOR), 5).astype(int)
    zeros = np.zeros_like(chroma)
    conditions = [sector == 0, sector == 1, sector == 2, sector == 3, sector == 4]

    r = np.select(conditions, [chroma, x, zeros, zeros, x], default=chroma)
    g = np.select(conditions, [x, chroma, chroma, x, zeros], default=zeros)
    b = np.select(conditions, [zeros, zeros, x, chroma, chroma], default=x)
    return r, g, b
