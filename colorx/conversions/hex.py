import re

from ..types.channel_format import HexStyle, OPAQUE_ALPHA, hex_digits
from .packed import normalize_packed

_HEX_PATTERN = re.compile(r"#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")


class HexFormatError(ValueError):
    """Raised when a string is not a ``#RRGGBB`` or ``#AARRGGBB`` color."""


def is_valid_hex(text: str) -> bool:
    return isinstance(text, str) and _HEX_PATTERN.fullmatch(text) is not None


def parse_hex(text: str) -> int:
    """
    Parse ``#RRGGBB`` or ``#AARRGGBB`` (case-insensitive) into a packed color.

    ``#RRGGBB`` is read as fully opaque.

    Raises:
        TypeError: If ``text`` is not a string
        HexFormatError: If ``text`` is not a well-formed hex color
    """
    if not isinstance(text, str):
        raise TypeError(f"Hex color must be a string, got {type(text).__name__}")
    if _HEX_PATTERN.fullmatch(text) is None:
        raise HexFormatError(f"Invalid hex color {text!r}; expected #RRGGBB or #AARRGGBB")

    value = int(text[1:], 16)
    if len(text) == 7:
        value |= OPAQUE_ALPHA
    return value


def format_hex(packed: int, style: HexStyle = HexStyle.ARGB) -> str:
    """
    Format a packed color as uppercase hex.

    ``HexStyle.ARGB`` (the default) always includes alpha: ``#AARRGGBB``.
    ``HexStyle.RGB`` drops it: ``#RRGGBB``.
    """
    packed = normalize_packed(packed)
    style = HexStyle(style)
    digits = hex_digits[style]
    if style == HexStyle.RGB:
        packed &= 0x00FFFFFF
    return f"#{packed:0{digits}X}"


def packed_to_hex(packed: int) -> str:
    """Display form of a packed color: ``#AARRGGBB``."""
    return format_hex(packed, HexStyle.ARGB)


def normalize_hex(text: str) -> str:
    """Return the canonical ``#AARRGGBB`` spelling of a hex color string."""
    return format_hex(parse_hex(text))
