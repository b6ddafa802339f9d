from typing import Callable, Dict, Tuple

from ..types.channel_format import BYTE_MAX
from ..types.color_types import ColorSpace, ChannelValue, normalize_space
from ..utils.num_utils import unit_to_byte
from .hex import format_hex, parse_hex
from .packed import normalize_packed, pack_argb, packed_to_unit_rgb, unit_rgb_to_packed, unpack_argb
from .to_cmyk import cmyk_to_unit_rgb, unit_rgb_to_cmyk
from .to_hsl import hsv_to_hsl, unit_rgb_to_hsl
from .to_hsv import hsl_to_hsv, unit_rgb_to_hsv
from .to_rgb import hsl_to_unit_rgb, hsv_to_unit_rgb


def _rgb_to_packed(rgb: Tuple[int, int, int]) -> int:
    return pack_argb(BYTE_MAX, *rgb)


def _argb_to_packed(argb: Tuple[int, int, int, int]) -> int:
    return pack_argb(*argb)


def _hex_to_packed(value: Tuple[str]) -> int:
    return parse_hex(value[0])


def _hsl_to_packed(hsl: Tuple[float, float, float]) -> int:
    return unit_rgb_to_packed(*hsl_to_unit_rgb(*hsl))


def _hsla_to_packed(hsla: Tuple[float, float, float, float]) -> int:
    h, s, l, a = hsla
    return unit_rgb_to_packed(*hsl_to_unit_rgb(h, s, l), alpha_byte=unit_to_byte(a))


def _hsv_to_packed(hsv: Tuple[float, float, float]) -> int:
    return unit_rgb_to_packed(*hsv_to_unit_rgb(*hsv))


def _cmyk_to_packed(cmyk: Tuple[float, float, float, float]) -> int:
    return unit_rgb_to_packed(*cmyk_to_unit_rgb(*cmyk))


def _packed_to_rgb(packed: int) -> Tuple[int, int, int]:
    return unpack_argb(packed)[1:]


def _packed_to_hsla(packed: int) -> Tuple[float, float, float, float]:
    return unit_rgb_to_hsl(*packed_to_unit_rgb(packed)) + (unpack_argb(packed)[0] / BYTE_MAX,)


TO_PACKED: Dict[str, Callable[[tuple], int]] = {
    "rgb": _rgb_to_packed,
    "argb": _argb_to_packed,
    "hex": _hex_to_packed,
    "hsl": _hsl_to_packed,
    "hsla": _hsla_to_packed,
    "hsv": _hsv_to_packed,
    "cmyk": _cmyk_to_packed,
}

FROM_PACKED: Dict[str, Callable[[int], tuple]] = {
    "rgb": _packed_to_rgb,
    "argb": unpack_argb,
    "hex": lambda packed: (format_hex(packed),),
    "hsl": lambda packed: unit_rgb_to_hsl(*packed_to_unit_rgb(packed)),
    "hsla": _packed_to_hsla,
    "hsv": lambda packed: unit_rgb_to_hsv(*packed_to_unit_rgb(packed)),
    "cmyk": lambda packed: unit_rgb_to_cmyk(*packed_to_unit_rgb(packed)),
}

# Hue-space pairs that skip the byte quantization of the packed hub
CONVERT_DIRECT: Dict[Tuple[str, str], Callable[[tuple], tuple]] = {
    ("hsl", "hsv"): lambda hsl: hsl_to_hsv(*hsl),
    ("hsla", "hsv"): lambda hsla: hsl_to_hsv(*hsla[:3]),
    ("hsv", "hsl"): lambda hsv: hsv_to_hsl(*hsv),
    ("hsv", "hsla"): lambda hsv: hsv_to_hsl(*hsv) + (1.0,),
    ("hsl", "hsla"): lambda hsl: tuple(hsl) + (1.0,),
    ("hsla", "hsl"): lambda hsla: tuple(hsla[:3]),
}


def _as_channels(color: ChannelValue) -> tuple:
    # a bare hex string is one channel
    if isinstance(color, str):
        return (color,)
    return tuple(color)


def channels_to_packed(channels: ChannelValue, from_space: ColorSpace) -> int:
    """Pack the channel tuple of ``from_space`` into a color int."""
    return TO_PACKED[normalize_space(from_space)](_as_channels(channels))


def packed_to_channels(packed: int, to_space: ColorSpace) -> tuple:
    """Unpack a color int into the channel tuple of ``to_space``."""
    return FROM_PACKED[normalize_space(to_space)](normalize_packed(packed))


def convert(
    color: ChannelValue,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> tuple:
    """
    Convert a channel tuple from one color space to another.

    Conversions route through the packed color except for the pairs in
    ``CONVERT_DIRECT``, which stay in the float domain.
    """
    fs, ts = normalize_space(from_space), normalize_space(to_space)
    color = _as_channels(color)
    if fs == ts:
        return color  # No conversion needed

    direct = CONVERT_DIRECT.get((fs, ts))
    if direct is not None:
        return tuple(direct(color))
    return FROM_PACKED[ts](TO_PACKED[fs](color))
