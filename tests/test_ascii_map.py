from viz.ascii_map import glyph, render_layout


def test_glyphs():
    assert glyph(None) == "."
    assert glyph(7) == "7"
    assert glyph(10) == "a"
    assert glyph(36) == "A"
    assert glyph(62) == "0"


def test_render_binned():
    blocks = [0] * 10 + [None] * 10
    assert render_layout(blocks, width=4) == "00.."
    assert render_layout([None, 5, None, None], width=2) == "5."


def test_render_narrow_disk_ignores_width():
    assert render_layout([1, None], width=80) == "1."
