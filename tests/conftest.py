"""Shared fixtures: a tiny TrueType font built with fontTools."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

UPM = 1000
ASCENT = 800
DESCENT = -200


def _notdef_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((450, 0))
    pen.lineTo((450, 700))
    pen.lineTo((50, 700))
    pen.closePath()
    return pen.glyph()


def _triangle_glyph():
    """Outer triangle plus an inner triangle: lines only."""
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((250, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    pen.moveTo((200, 100))
    pen.lineTo((300, 100))
    pen.lineTo((250, 300))
    pen.closePath()
    return pen.glyph()


def _oval_glyph():
    """One contour with two runs of consecutive control points."""
    pen = TTGlyphPen(None)
    pen.moveTo((250, 0))
    pen.qCurveTo((500, 0), (500, 700), (250, 700))
    pen.qCurveTo((0, 700), (0, 0), (250, 0))
    pen.closePath()
    return pen.glyph()


@pytest.fixture(scope="session")
def test_font_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Build a TTF with .notdef, space, A (lines), o (curves) and Aacute (composite)."""
    glyph_order = [".notdef", "space", "A", "o", "Aacute"]
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)

    glyf = {
        ".notdef": _notdef_glyph(),
        "space": TTGlyphPen(None).glyph(),
        "A": _triangle_glyph(),
        "o": _oval_glyph(),
    }
    component_pen = TTGlyphPen({"A": glyf["A"]})
    component_pen.addComponent("A", (1, 0, 0, 1, 0, 0))
    glyf["Aacute"] = component_pen.glyph()

    hmtx = {
        ".notdef": (500, 50),
        "space": (0, 0),
        "A": (500, 0),
        "o": (600, 0),
        "Aacute": (500, 0),
    }

    fb.setupGlyf(glyf)
    fb.setupHorizontalMetrics(hmtx)
    fb.setupCharacterMap({0x20: "space", 0x41: "A", 0x6F: "o", 0xC1: "Aacute"})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
    )
    fb.setupNameTable({"familyName": "Glyphpath Test", "styleName": "Regular"})
    fb.setupPost()

    path = tmp_path_factory.mktemp("fonts") / "GlyphpathTest-Regular.ttf"
    fb.save(str(path))
    return path
