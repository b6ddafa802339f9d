import colorx
from colorx import ColorRGB, packed_to_hex, shades, tints, triadic, tetradic, analogous, is_dark

def test_collaborator_entry_points():
    pink = 0xFFE91E63
    assert packed_to_hex(pink) == "#FFE91E63"
    assert len(shades(pink)) == 11
    assert len(tints(pink)) == 11
    assert len(triadic(pink)) == 2
    assert len(tetradic(pink)) == 3
    assert len(analogous(pink)) == 2
    assert is_dark(pink)

def test_exports():
    for name in colorx.__all__:
        assert hasattr(colorx, name), name

def test_end_to_end():
    color = colorx.convert_color(0xFFE91E63, "rgb")
    assert color == ColorRGB(233, 30, 99)
    assert color.as_hex().hex == "#FFE91E63"
    assert [c.as_hex().hex for c in color.triadic()] == ["#FF63E91E", "#FF1E63E9"]
