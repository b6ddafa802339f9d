"""
Color derivations on packed color ints.

Every algorithm is written once here against the packed form; the color
classes in :mod:`colorx.colors` convert in, call these and convert back.
"""

from .lightness import lighten, darken, lighten_percent, darken_percent, shades, tints, lightness_grid
from .harmony import rotate_hue, complementary, complimentary, triadic, tetradic, analogous
from .contrast import srgb_to_linear, relative_luminance, is_dark, contrasting

__all__ = [
    "lighten",
    "darken",
    "lighten_percent",
    "darken_percent",
    "shades",
    "tints",
    "lightness_grid",
    "rotate_hue",
    "complementary",
    "complimentary",
    "triadic",
    "tetradic",
    "analogous",
    "srgb_to_linear",
    "relative_luminance",
    "is_dark",
    "contrasting",
]
