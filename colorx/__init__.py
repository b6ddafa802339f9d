"""colorx: color conversions and derived colors (shades, tints, harmonies, contrast)."""

from .colors import (
    ColorBase,
    ColorRGB,
    ColorARGB,
    ColorHEX,
    ColorHSL,
    ColorHSLA,
    ColorHSV,
    ColorCMYK,
    color_convert,
    convert_color,
    get_color_class,
)
from .conversions import (
    HexFormatError,
    convert,
    format_hex,
    packed_to_hex,
    parse_hex,
    pack_argb,
    unpack_argb,
)
from .derivations import (
    lighten,
    darken,
    lighten_percent,
    darken_percent,
    shades,
    tints,
    complementary,
    complimentary,
    triadic,
    tetradic,
    analogous,
    relative_luminance,
    is_dark,
    contrasting,
)
from .types import ColorSpace, HexStyle

__all__ = [
    # Color classes
    "ColorBase",
    "ColorRGB",
    "ColorARGB",
    "ColorHEX",
    "ColorHSL",
    "ColorHSLA",
    "ColorHSV",
    "ColorCMYK",
    "color_convert",
    "convert_color",
    "get_color_class",
    # Packed colors and hex strings
    "HexFormatError",
    "convert",
    "format_hex",
    "packed_to_hex",
    "parse_hex",
    "pack_argb",
    "unpack_argb",
    # Derivations on packed colors
    "lighten",
    "darken",
    "lighten_percent",
    "darken_percent",
    "shades",
    "tints",
    "complementary",
    "complimentary",
    "triadic",
    "tetradic",
    "analogous",
    "relative_luminance",
    "is_dark",
    "contrasting",
    # Types
    "ColorSpace",
    "HexStyle",
]

__version__ = "0.1.0"
