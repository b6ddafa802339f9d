# No dependencies
from enum import Enum


class HexStyle(str, Enum):
    ARGB = "argb"
    RGB = "rgb"

hex_digits = {
    HexStyle.ARGB: 8,
    HexStyle.RGB: 6,
}

BYTE_MAX = 255
HUE_360 = 360.0
HUE_SECTOR = 60.0

PACKED_MASK = 0xFFFFFFFF
PACKED_SIGNED_MIN = -(1 << 31)
OPAQUE_ALPHA = 0xFF000000
PACKED_WHITE = 0xFFFFFFFF
PACKED_BLACK = 0xFF000000

# Fixed-point resolution for lightness series
LIGHTNESS_GRID = 10_000_000
DEFAULT_SERIES_COUNT = 10

# Relative luminance (sRGB / Rec. 709)
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722
SRGB_LINEAR_THRESHOLD = 0.03928
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_GAMMA = 2.4
DARK_LUMINANCE_THRESHOLD = 0.5

# Hue offsets in degrees
COMPLEMENTARY_OFFSET = 180.0
TRIADIC_OFFSETS = (120.0, 240.0)
TETRADIC_OFFSETS = (90.0, 180.0, 270.0)
ANALOGOUS_OFFSETS = (30.0, 330.0)
