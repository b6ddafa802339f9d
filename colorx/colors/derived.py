"""
Derivation methods shared by every color class.

Each method converts the color to its packed form, runs the engine in
:mod:`colorx.derivations` and converts the result back to the caller's class.
"""
from __future__ import annotations
import warnings
from numbers import Integral
from typing import List, Optional, Tuple

from .color_base import ColorBase
from .. import derivations
from ..types.channel_format import DEFAULT_SERIES_COUNT


def _rebuild(self: ColorBase, packed: int) -> ColorBase:
    return self.from_packed(packed)


def lighten(self: ColorBase, amount: float) -> ColorBase:
    """
    Lighten the color in HSL space.

    Args:
        amount: An ``int`` is a percentage in [0, 100]; a ``float`` is
            normalized to [0, 1]. ``lighten(20)`` equals ``lighten(0.2)``.
    """
    if isinstance(amount, Integral) and not isinstance(amount, bool):
        return _rebuild(self, derivations.lighten_percent(self.to_packed(), int(amount)))
    return _rebuild(self, derivations.lighten(self.to_packed(), amount))


def darken(self: ColorBase, amount: float) -> ColorBase:
    """Darken the color in HSL space; ``amount`` follows :meth:`lighten`."""
    if isinstance(amount, Integral) and not isinstance(amount, bool):
        return _rebuild(self, derivations.darken_percent(self.to_packed(), int(amount)))
    return _rebuild(self, derivations.darken(self.to_packed(), amount))


def shades(self: ColorBase, count: int = DEFAULT_SERIES_COUNT) -> List[ColorBase]:
    """``count + 1`` colors from this one down to lightness 0."""
    return [_rebuild(self, p) for p in derivations.shades(self.to_packed(), count)]


def tints(self: ColorBase, count: int = DEFAULT_SERIES_COUNT) -> List[ColorBase]:
    """``count + 1`` colors from this one up to lightness 1."""
    return [_rebuild(self, p) for p in derivations.tints(self.to_packed(), count)]


def complementary(self: ColorBase) -> ColorBase:
    return _rebuild(self, derivations.complementary(self.to_packed()))


def complimentary(self: ColorBase) -> ColorBase:
    warnings.warn(
        "complimentary is deprecated. Use complementary instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    return complementary(self)


def triadic(self: ColorBase) -> Tuple[ColorBase, ColorBase]:
    first, second = derivations.triadic(self.to_packed())
    return _rebuild(self, first), _rebuild(self, second)


def tetradic(self: ColorBase) -> Tuple[ColorBase, ColorBase, ColorBase]:
    first, second, third = derivations.tetradic(self.to_packed())
    return _rebuild(self, first), _rebuild(self, second), _rebuild(self, third)


def analogous(self: ColorBase) -> Tuple[ColorBase, ColorBase]:
    first, second = derivations.analogous(self.to_packed())
    return _rebuild(self, first), _rebuild(self, second)


def luminance(self: ColorBase) -> float:
    """Relative luminance in [0, 1]."""
    return derivations.relative_luminance(self.to_packed())


def is_dark(self: ColorBase) -> bool:
    return derivations.is_dark(self.to_packed())


def contrasting(
    self: ColorBase,
    light: Optional[ColorBase] = None,
    dark: Optional[ColorBase] = None,
) -> ColorBase:
    """
    Return ``light`` if this color is dark, else ``dark``.

    ``None`` picks this class's own white or black.
    """
    if self.is_dark():
        return light if light is not None else type(self).white()
    return dark if dark is not None else type(self).black()


ColorBase.lighten = lighten
ColorBase.darken = darken
ColorBase.shades = shades
ColorBase.tints = tints
ColorBase.complementary = complementary
ColorBase.complimentary = complimentary  # type: ignore[attr-defined]
ColorBase.triadic = triadic
ColorBase.tetradic = tetradic
ColorBase.analogous = analogous
ColorBase.luminance = luminance
ColorBase.is_dark = is_dark
ColorBase.contrasting = contrasting
