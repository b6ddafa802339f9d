from colorx.utils import get_dimension, round_half_up, unit_to_byte, check_positive_int
from colorx.conversions.numbers import clamp01, wrap_hue
from colorx.types import normalize_space, is_hue_space, has_alpha_channel, HexStyle
import numpy as np
import pytest

def test_get_dimension():
    assert get_dimension(None) == 0
    assert get_dimension("#FFFFFF") == 1
    assert get_dimension(3.0) == 1
    assert get_dimension((1, 2, 3)) == 3

def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(1.49) == 1

def test_unit_to_byte():
    assert unit_to_byte(0.5) == 128
    assert unit_to_byte(1.0) == 255
    assert unit_to_byte(2.0) == 255
    assert unit_to_byte(-1.0) == 0

def test_check_positive_int():
    assert check_positive_int(3, "count") == 3
    with pytest.raises(ValueError):
        check_positive_int(0, "count")
    with pytest.raises(TypeError):
        check_positive_int(True, "count")
    with pytest.raises(TypeError):
        check_positive_int(1.0, "count")
    assert check_positive_int(np.int64(7), "count") == 7

def test_clamp01():
    assert clamp01(-0.1) == 0.0
    assert clamp01(1.1) == 1.0
    assert clamp01(0.3) == 0.3

def test_wrap_hue():
    assert wrap_hue(360.0) == 0.0
    assert wrap_hue(-90.0) == 270.0
    assert wrap_hue(725.0) == 5.0
    assert 0.0 <= wrap_hue(-1e-14) < 360.0

def test_normalize_space():
    assert normalize_space("HSLA") == "hsla"
    with pytest.raises(ValueError):
        normalize_space("lab")
    with pytest.raises(TypeError):
        normalize_space(None)

def test_space_predicates():
    assert is_hue_space("hsv")
    assert not is_hue_space("cmyk")
    assert has_alpha_channel("hex")
    assert not has_alpha_channel("rgb")

def test_hex_style():
    assert HexStyle("rgb") is HexStyle.RGB
    assert HexStyle.ARGB == "argb"
