from colorx.derivations import srgb_to_linear, relative_luminance, is_dark, contrasting
from colorx.colors import ColorRGB, ColorARGB, ColorHEX, ColorCMYK, ColorHSV
from ..samples import PINK

def test_srgb_to_linear():
    assert srgb_to_linear(0) == 0.0
    assert abs(srgb_to_linear(255) - 1.0) < 1e-12
    # 10/255 is under the linear threshold
    assert abs(srgb_to_linear(10) - (10 / 255) / 12.92) < 1e-12

def test_relative_luminance():
    assert relative_luminance(0xFF000000) == 0.0
    assert abs(relative_luminance(0xFFFFFFFF) - 1.0) < 1e-12
    assert abs(relative_luminance(0xFF00FF00) - 0.7152) < 1e-12
    assert relative_luminance(0x00FFFFFF) == relative_luminance(0xFFFFFFFF)

def test_is_dark_reference():
    assert is_dark(PINK)
    assert not is_dark(0xFF1EE9A4)
    assert is_dark(0xFF000000)
    assert not is_dark(-1)

def test_contrasting_defaults():
    assert contrasting(PINK) == 0xFFFFFFFF
    assert contrasting(0xFF1EE9A4) == 0xFF000000
    assert contrasting(PINK, light=-1, dark=0) == 0xFFFFFFFF

def test_is_dark_methods():
    assert ColorRGB(233, 30, 99).is_dark()
    assert not ColorRGB(30, 233, 164).is_dark()
    assert abs(ColorRGB(255, 255, 255).luminance() - 1.0) < 1e-12

def test_contrasting_methods():
    assert ColorRGB(233, 30, 99).contrasting() == ColorRGB(255, 255, 255)
    assert ColorRGB(30, 233, 164).contrasting() == ColorRGB(0, 0, 0)
    assert ColorCMYK(0.0, 0.0, 0.0, 1.0).contrasting() == ColorCMYK(0.0, 0.0, 0.0, 0.0)
    assert ColorCMYK.white().contrasting() == ColorCMYK(0.0, 0.0, 0.0, 1.0)
    assert ColorHEX("#FFFFFF").contrasting() == ColorHEX("#FF000000")
    assert ColorHSV.black().contrasting() == ColorHSV.white()

def test_contrasting_custom_choices():
    light, dark = ColorARGB(255, 250, 250, 250), ColorARGB(255, 20, 20, 20)
    assert ColorARGB(255, 0, 0, 0).contrasting(light, dark) is light
    assert ColorARGB(255, 255, 255, 0).contrasting(light, dark) is dark
