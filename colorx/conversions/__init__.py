"""
colorx Color Conversions
========================

Conversion math between packed color ints, RGB, HSL, HSV, CMYK and hex
strings, with scalar functions for single colors and numpy-vectorized
counterparts for batches.

Features
--------
- Hub-and-spoke conversions through the 32-bit packed color
- Direct float-domain RGB ↔ HSL, RGB ↔ HSV and HSL ↔ HSV math
- CMYK with the pure-black (key == 1) case resolved to zero ink
- Strict ``#RRGGBB`` / ``#AARRGGBB`` parsing and uppercase formatting
- Half-up byte rounding shared by the scalar and vectorized paths

Conversion Functions
-------------------

RGB → HSL / HSV / CMYK:
    unit_rgb_to_hsl(r, g, b), np_unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_hsv(r, g, b), np_unit_rgb_to_hsv(r, g, b)
    unit_rgb_to_cmyk(r, g, b)

HSL / HSV / CMYK → RGB:
    hsl_to_unit_rgb(h, s, l), np_hsl_to_unit_rgb(h, s, l)
    hsv_to_unit_rgb(h, s, v), np_hsv_to_unit_rgb(h, s, v)
    cmyk_to_unit_rgb(c, m, y, k)

HSV ↔ HSL:
    hsv_to_hsl, hsl_to_hsv, np_hsv_to_hsl, np_hsl_to_hsv

Packed colors:
    pack_argb, unpack_argb, normalize_packed, to_signed,
    packed_to_unit_rgb, unit_rgb_to_packed, np_unit_rgb_to_packed

Hex strings:
    parse_hex(text), format_hex(packed, style), packed_to_hex(packed)

High-Level API
-------------
    convert(color, from_space, to_space)
        Convert a channel tuple between any two color spaces
    channels_to_packed(channels, from_space), packed_to_channels(packed, to_space)

Examples
--------
>>> from colorx.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb, packed_to_hex
>>>
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.5, 0.0)
>>> r, g, b = hsl_to_unit_rgb(h, s, l)
>>> packed_to_hex(0xFFE91E63)
'#FFE91E63'
"""

# RGB → HSL conversions
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl

# RGB → HSV conversions
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv

# HSL / HSV → RGB conversions
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb, hsv_to_unit_rgb, np_hsv_to_unit_rgb

# HSV ↔ HSL conversions
from .to_hsv import hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

# RGB ↔ CMYK conversions
from .to_cmyk import unit_rgb_to_cmyk, cmyk_to_unit_rgb

# Packed colors
from .packed import (
    normalize_packed,
    to_signed,
    pack_argb,
    unpack_argb,
    with_alpha,
    packed_to_unit_rgb,
    unit_rgb_to_packed,
    np_unit_rgb_to_packed,
)

# Hex strings
from .hex import HexFormatError, is_valid_hex, parse_hex, format_hex, packed_to_hex, normalize_hex

# High-level API
from .wrapper import convert, channels_to_packed, packed_to_channels

from ..types.channel_format import HexStyle
from ..types.color_types import ColorSpace

__all__ = [
    # RGB → HSL / HSV / CMYK
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'unit_rgb_to_cmyk',

    # HSL / HSV / CMYK → RGB
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'cmyk_to_unit_rgb',

    # HSV ↔ HSL
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',

    # Packed colors
    'normalize_packed',
    'to_signed',
    'pack_argb',
    'unpack_argb',
    'with_alpha',
    'packed_to_unit_rgb',
    'unit_rgb_to_packed',
    'np_unit_rgb_to_packed',

    # Hex strings
    'HexFormatError',
    'is_valid_hex',
    'parse_hex',
    'format_hex',
    'packed_to_hex',
    'normalize_hex',

    # High-level API
    'convert',
    'channels_to_packed',
    'packed_to_channels',

    # Types
    'HexStyle',
    'ColorSpace',
]
