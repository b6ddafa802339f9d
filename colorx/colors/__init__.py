"""
colorx Color Classes
====================

Immutable color classes for every supported representation, all sharing
:class:`ColorBase`.

Features
--------
- Immutable color instances (frozen after initialization)
- Construction from channels, a channel tuple, another color, or a packed int
- Value clamping to valid ranges, hue wrapped into [0, 360)
- Conversion between any two representations
- Alpha channel support with WithAlpha mixin
- Derived colors (shades, tints, harmonies, lighten/darken, contrast) on every class

Usage
-----
>>> from colorx.colors import ColorRGB, ColorHEX
>>>
>>> color = ColorRGB(233, 30, 99)
>>> color.as_hex()
ColorHEX('#FFE91E63')
>>> color.is_dark()
True
>>> [str(c) for c in color.triadic()]
['99 / 233 / 30', '30 / 99 / 233']
>>>
>>> # Work with alpha
>>> ColorHEX("#80E91E63").alpha
128

Color Classes
-------------
    - ColorRGB: Integer RGB (0-255), implicitly opaque
    - ColorARGB: Integer ARGB with alpha first
    - ColorHEX: ``#AARRGGBB`` string
    - ColorHSL: Float HSL (hue in degrees, saturation/lightness 0.0-1.0)
    - ColorHSLA: Float HSLA with alpha
    - ColorHSV: Float HSV
    - ColorCMYK: Float CMYK (0.0-1.0)

Notes
-----
- Conversions go through the packed 32-bit form, except HSL ↔ HSV which
  stay in floats
- Derivations convert to packed, run once in :mod:`colorx.derivations`
  and convert back into the receiver's class
"""

from .color_base import ColorBase, WithAlpha
from .rgb import ColorRGB, ColorARGB
from .hex import ColorHEX
from .hsl import ColorHSL, ColorHSLA
from .hsv import ColorHSV
from .cmyk import ColorCMYK
from .color import color_convert, convert_color, get_color_class, unified_space_to_class
from . import derived  # noqa: F401  attaches derivation methods


__all__ = [
    'ColorBase',
    'WithAlpha',
    'ColorRGB',
    'ColorARGB',
    'ColorHEX',
    'ColorHSL',
    'ColorHSLA',
    'ColorHSV',
    'ColorCMYK',
    'color_convert',
    'convert_color',
    'get_color_class',
    'unified_space_to_class',
]
