from numbers import Real
from typing import List

import numpy as np
from boundednumbers import clamp

from ..conversions.packed import np_unit_rgb_to_packed, unpack_argb
from ..conversions.to_rgb import np_hsl_to_unit_rgb
from ..conversions.wrapper import channels_to_packed, packed_to_channels
from ..types.channel_format import DEFAULT_SERIES_COUNT, LIGHTNESS_GRID
from ..utils.num_utils import check_positive_int, round_half_up


def _check_amount(amount: float, name: str = "amount") -> float:
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise TypeError(f"{name} must be a real number, got {type(amount).__name__}")
    return float(amount)


def _shift_lightness(packed: int, delta: float) -> int:
    h, s, l, a = packed_to_channels(packed, "hsla")
    lightness = float(clamp(l + delta, 0.0, 1.0))
    return channels_to_packed((h, s, lightness, a), "hsla")


def lighten(packed: int, amount: float) -> int:
    """
    Raise the HSL lightness of a packed color.

    Args:
        packed: Packed color
        amount: Lightness to add, normalized to [0, 1]. An int is not read as a
            percentage here (``lighten(p, 20)`` is white); use :func:`lighten_percent`.
            The color methods do take ints as percentages.

    Returns:
        Packed color with lightness clamped to [0, 1]; hue, saturation and alpha kept
    """
    return _shift_lightness(packed, _check_amount(amount))


def darken(packed: int, amount: float) -> int:
    """
    Lower the HSL lightness of a packed color by ``amount`` in [0, 1].

    Like :func:`lighten`, ints are not percentages; use :func:`darken_percent`.
    """
    return _shift_lightness(packed, -_check_amount(amount))


def lighten_percent(packed: int, percent: int) -> int:
    """``lighten`` with the amount given as a percentage in [0, 100]."""
    return lighten(packed, _check_amount(percent, "percent") / 100.0)


def darken_percent(packed: int, percent: int) -> int:
    """``darken`` with the amount given as a percentage in [0, 100]."""
    return darken(packed, _check_amount(percent, "percent") / 100.0)


def lightness_grid(start: int, stop: int, count: int) -> np.ndarray:
    """
    ``count + 1`` integer grid points walking from ``start`` to ``stop``.

    The step is the span divided by ``count``, truncated toward zero, so the
    intermediate points never overshoot; the last point is pinned to ``stop``.
    """
    span = stop - start
    step = abs(span) // count
    if span < 0:
        step = -step
    grid = start + step * np.arange(count + 1, dtype=np.int64)
    grid[-1] = stop
    return grid


def _lightness_series(packed: int, end: float, count: int) -> List[int]:
    count = check_positive_int(count, "count")
    h, s, l, _ = packed_to_channels(packed, "hsla")
    alpha_byte = unpack_argb(packed)[0]

    start = round_half_up(l * LIGHTNESS_GRID)
    stop = round_half_up(end * LIGHTNESS_GRID)
    lightness = lightness_grid(start, stop, count) / LIGHTNESS_GRID

    rgb = np_hsl_to_unit_rgb(h, s, lightness)
    return [int(p) for p in np_unit_rgb_to_packed(rgb, alpha_byte)]


def shades(packed: int, count: int = DEFAULT_SERIES_COUNT) -> List[int]:
    """
    Darker variants of a packed color, from its own lightness down to black.

    Returns ``count + 1`` packed colors; index 0 is the source color (with
    its lightness quantized to the series grid) and the last is lightness 0.

    Raises:
        ValueError: If ``count`` is not positive
        TypeError: If ``count`` is not an int
    """
    return _lightness_series(packed, 0.0, count)


def tints(packed: int, count: int = DEFAULT_SERIES_COUNT) -> List[int]:
    """
    Lighter variants of a packed color, from its own lightness up to white.

    Returns ``count + 1`` packed colors; the last one has lightness 1.
    """
    return _lightness_series(packed, 1.0, count)
