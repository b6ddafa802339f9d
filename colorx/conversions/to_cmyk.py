from .numbers import clamp01


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Convert unit RGB to CMYK.

    Pure black (key == 1) has no defined ink mix; cyan, magenta and yellow
    are reported as 0 instead of dividing by zero.
    """
    key = 1.0 - max(r, g, b)
    if key >= 1.0:
        return 0.0, 0.0, 0.0, 1.0

    ink = 1.0 - key
    cyan = (1.0 - r - key) / ink
    magenta = (1.0 - g - key) / ink
    yellow = (1.0 - b - key) / ink
    return clamp01(cyan), clamp01(magenta), clamp01(yellow), clamp01(key)


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """Convert CMYK to unit RGB."""
    return (
        clamp01((1.0 - c) * (1.0 - k)),
        clamp01((1.0 - m) * (1.0 - k)),
        clamp01((1.0 - y) * (1.0 - k)),
    )
