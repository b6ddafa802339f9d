from boundednumbers.functions import clamp, cyclic_wrap_float

from ..types.channel_format import HUE_360


def clamp01(value: float) -> float:
    """Clamp a float to the inclusive range ``[0, 1]``."""
    return float(clamp(value, 0.0, 1.0))


def wrap_hue(hue: float) -> float:
    """Wrap a hue in degrees into ``[0, 360)``."""
    wrapped = float(cyclic_wrap_float(hue, 0.0, HUE_360))
    # float modulo of a tiny negative lands on 360.0
    return 0.0 if wrapped >= HUE_360 else wrapped
