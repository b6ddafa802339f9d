from colorx.colors import ColorRGB, ColorARGB, ColorHEX, ColorHSL, ColorHSLA, ColorHSV, ColorCMYK, unified_space_to_class
from ..samples import samples_packed_argb, samples_signed_packed
import numpy as np

ALPHA_AWARE = (ColorARGB, ColorHEX, ColorHSLA)
OPAQUE_ONLY = (ColorRGB, ColorHSL, ColorHSV, ColorCMYK)

def _sample_packed():
    rng = np.random.default_rng(2024)
    packed = [int(p) for p in rng.integers(0, 1 << 32, size=300, dtype=np.int64)]
    return packed + list(samples_packed_argb)

def test_alpha_aware_round_trip_is_exact():
    for packed in _sample_packed():
        for cls in ALPHA_AWARE:
            assert cls.from_packed(packed).to_packed() == packed

def test_opaque_round_trip_forces_alpha():
    for packed in _sample_packed():
        opaque = packed | 0xFF000000
        for cls in OPAQUE_ONLY:
            assert cls.from_packed(packed).to_packed() == opaque

def test_signed_packed_input():
    for signed, unsigned in samples_signed_packed.items():
        assert ColorARGB.from_packed(signed).to_packed() == unsigned
    assert ColorRGB.from_packed(-1) == ColorRGB(255, 255, 255)
    assert ColorHEX.from_packed(-885853).hex == "#FFF27BA3"

def test_round_trip_through_every_space():
    for packed in _sample_packed()[:50]:
        start = ColorARGB.from_packed(packed | 0xFF000000)
        for cls in unified_space_to_class.values():
            assert start.convert(cls.mode).as_argb() == start
