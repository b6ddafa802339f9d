from colorx.colors import ColorRGB, ColorARGB, ColorHEX, ColorHSL, ColorHSLA, ColorHSV, ColorCMYK, convert_color, get_color_class
from ..samples import samples_rgb_hsv, samples_rgb_hsl, samples_rgb_cmyk, PINK
import numpy as np
import pytest

def _byte_rgb(rgb):
    return tuple(int(np.floor(c * 255 + 0.5)) for c in rgb)

def test_class_conversion_rgb_to_hsv():
    for rgb, hsv_expected in samples_rgb_hsv.items():
        h_exp, s_exp, v_exp = hsv_expected

        hsv = ColorRGB(_byte_rgb(rgb)).convert("hsv")
        h, s, v = hsv.channels
        assert abs(h - h_exp) < .5
        assert abs(s - s_exp) < 1/255
        assert abs(v - v_exp) < 1/255
        assert isinstance(hsv, ColorHSV)

def test_class_conversion_rgb_to_hsl():
    for rgb, hsl_expected in samples_rgb_hsl.items():
        h_exp, s_exp, l_exp = hsl_expected

        hsl = ColorRGB(_byte_rgb(rgb)).as_hsl()
        assert abs(hsl.hue - h_exp) < .5
        assert abs(hsl.saturation - s_exp) < 1/255
        assert abs(hsl.lightness - l_exp) < 1/255
        assert isinstance(hsl, ColorHSL)

def test_class_conversion_rgb_to_cmyk():
    for rgb, cmyk_expected in samples_rgb_cmyk.items():
        cmyk = ColorRGB(_byte_rgb(rgb)).as_cmyk()
        assert np.allclose(cmyk.channels, cmyk_expected, atol=1/255)
        assert isinstance(cmyk, ColorCMYK)

def test_class_conversion_hsl_to_rgb():
    for rgb, hsl in samples_rgb_hsl.items():
        color = ColorHSL(hsl).as_rgb()
        assert color == ColorRGB(_byte_rgb(rgb))

def test_class_conversion_hsv_to_hsl_is_direct():
    hsl = ColorHSV(210.0, 2 / 3, 0.75).as_hsl()
    assert abs(hsl.saturation - 0.5) < 1e-9
    assert abs(hsl.lightness - 0.5) < 1e-9

def test_reference_pink_in_every_class():
    assert ColorRGB.from_packed(PINK) == ColorRGB(233, 30, 99)
    assert ColorARGB.from_packed(PINK) == ColorARGB(255, 233, 30, 99)
    assert ColorHEX.from_packed(PINK) == ColorHEX("#E91E63")
    for cls in (ColorRGB, ColorARGB, ColorHEX, ColorHSLA):
        assert cls.from_packed(PINK).to_packed() == PINK

    hsl = ColorHSL.from_packed(PINK)
    assert abs(hsl.hue - 339.61) < 0.01
    assert abs(hsl.saturation - 0.82) < 0.005
    assert abs(hsl.lightness - 0.52) < 0.005

def test_named_channels():
    rgb = ColorRGB(233, 30, 99)
    assert (rgb.red, rgb.green, rgb.blue) == (233, 30, 99)
    argb = ColorARGB(128, 233, 30, 99)
    assert (argb.alpha, argb.red, argb.green, argb.blue) == (128, 233, 30, 99)
    hsv = ColorHSV(10.0, 0.5, 0.25)
    assert (hsv.hue, hsv.saturation, hsv.value) == (10.0, 0.5, 0.25)
    cmyk = ColorCMYK(0.1, 0.2, 0.3, 0.4)
    assert (cmyk.cyan, cmyk.magenta, cmyk.yellow, cmyk.key) == (0.1, 0.2, 0.3, 0.4)

def test_construction_forms():
    assert ColorRGB(233, 30, 99) == ColorRGB((233, 30, 99)) == ColorRGB([233, 30, 99])
    assert ColorRGB(ColorHEX("#E91E63")) == ColorRGB(233, 30, 99)
    assert ColorRGB(233, 30, 99).to_tuple() == (233, 30, 99)

def test_channels_are_clamped():
    assert ColorRGB(300, -5, 99).channels == (255, 0, 99)
    assert ColorHSL(10.0, 1.5, -0.5).channels == (10.0, 1.0, 0.0)
    assert ColorARGB(999, 0, 0, 0).alpha == 255

def test_hue_is_wrapped():
    assert ColorHSL(370.0, 0.5, 0.5).hue == 10.0
    assert ColorHSV(-30.0, 0.5, 0.5).hue == 330.0
    assert ColorHSL(360.0, 0.5, 0.5).hue == 0.0

def test_channel_types():
    assert ColorRGB(1.9, 2.0, 3.0).channels == (1, 2, 3)
    assert all(isinstance(c, float) for c in ColorHSL(1, 0, 1).channels)

def test_wrong_channel_count():
    with pytest.raises(ValueError):
        ColorRGB(1, 2)
    with pytest.raises(ValueError):
        ColorCMYK(0.0, 0.0, 0.0)

def test_non_numeric_channel():
    with pytest.raises(TypeError):
        ColorRGB("a", 2, 3)
    with pytest.raises(TypeError):
        ColorHSL(None, 0.5, 0.5)

def test_cmyk_full_key_drops_ink():
    assert ColorCMYK(0.3, 0.6, 0.9, 1.0).channels == (0.0, 0.0, 0.0, 1.0)
    assert ColorRGB(0, 0, 0).as_cmyk() == ColorCMYK(0.0, 0.0, 0.0, 1.0)

def test_hex_class():
    color = ColorHEX("#e91e63")
    assert color.hex == "#FFE91E63"
    assert color.pure_value == "FFE91E63"
    assert color.alpha == 255
    assert color.format() == "#FFE91E63"
    assert color.format("rgb") == "#E91E63"
    assert ColorHEX("#80E91E63").alpha == 128
    assert ColorHEX("#FFE91E63").with_alpha(0).hex == "#00E91E63"

def test_hex_class_invalid():
    with pytest.raises(ValueError):
        ColorHEX("not-a-color")
    with pytest.raises(TypeError):
        ColorHEX(0xFFE91E63)

def test_str_forms():
    assert str(ColorRGB(233, 30, 99)) == "233 / 30 / 99"
    assert str(ColorARGB(255, 233, 30, 99)) == "255 / 233 / 30 / 99"
    assert str(ColorHEX("#E91E63")) == "#FFE91E63"
    assert str(ColorHSL.from_packed(PINK)) == "339.61º / 0.82 / 0.52"
    assert str(ColorHSLA.from_packed(PINK)) == "339.61º / 0.82 / 0.52 / 1.00"
    assert str(ColorHSV.from_packed(PINK)) == "339.61º / 0.87 / 0.91"
    assert str(ColorCMYK.from_packed(PINK)) == "0.00 / 0.87 / 0.58 / 0.09"

def test_repr():
    assert repr(ColorRGB(233, 30, 99)) == "ColorRGB(233, 30, 99)"
    assert repr(ColorHEX("#E91E63")) == "ColorHEX('#FFE91E63')"

def test_equality_and_hash():
    assert ColorRGB(1, 2, 3) == ColorRGB(1, 2, 3)
    assert ColorRGB(1, 2, 3) != ColorRGB(1, 2, 4)
    assert ColorRGB(0, 0, 0) != ColorARGB(255, 0, 0, 0)
    assert len({ColorRGB(1, 2, 3), ColorRGB(1, 2, 3), ColorHEX("#010203")}) == 2

def test_space_flags():
    assert ColorARGB(0, 0, 0, 0).has_alpha
    assert ColorHEX("#000000").has_alpha
    assert not ColorRGB(0, 0, 0).has_alpha
    assert ColorHSV(0.0, 0.0, 0.0).has_hue
    assert not ColorCMYK(0.0, 0.0, 0.0, 0.0).has_hue

def test_convert_color():
    assert convert_color(PINK, "rgb") == ColorRGB(233, 30, 99)
    assert convert_color(-1, "hex") == ColorHEX("#FFFFFFFF")
    assert convert_color(ColorRGB(233, 30, 99), "HEX") == ColorHEX("#E91E63")
    with pytest.raises(TypeError):
        convert_color("#E91E63", "rgb")

def test_get_color_class():
    assert get_color_class("HSLA") is ColorHSLA
    with pytest.raises(ValueError):
        get_color_class("lab")
    with pytest.raises(ValueError):
        ColorRGB(1, 2, 3).convert("lab")
