"""Shared fixtures: small fonts built on the fly with fontTools."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

Drawing = Callable[[Any], None]


def draw_square(pen: Any) -> None:
    """Square from (0, 0) to (100, 100), all on-curve points."""
    pen.moveTo((0, 0))
    pen.lineTo((100, 0))
    pen.lineTo((100, 100))
    pen.lineTo((0, 100))
    pen.closePath()


def draw_ring(pen: Any) -> None:
    """Rounded outer contour made of quadratic arcs plus a square hole."""
    pen.moveTo((50, 0))
    pen.qCurveTo((100, 0), (100, 50))
    pen.qCurveTo((100, 100), (50, 100))
    pen.qCurveTo((0, 100), (0, 50))
    pen.qCurveTo((0, 0), (50, 0))
    pen.closePath()
    pen.moveTo((25, 25))
    pen.lineTo((25, 75))
    pen.lineTo((75, 75))
    pen.lineTo((75, 25))
    pen.closePath()


def draw_implied(pen: Any) -> None:
    """Contour with two consecutive off-curve points (implied on-curve)."""
    pen.moveTo((0, 0))
    pen.qCurveTo((0, 100), (101, 100), (101, 0))
    pen.closePath()


def draw_cubic(pen: Any) -> None:
    """Contour with one cubic arc followed by a line."""
    pen.moveTo((0, 0))
    pen.curveTo((0, 50), (50, 100), (100, 100))
    pen.lineTo((100, 0))
    pen.closePath()


TTF_DRAWINGS: dict[str, Drawing] = {
    "A": draw_square,
    "O": draw_ring,
    "S": draw_implied,
}
TTF_CMAP = {
    ord("A"): "A",
    ord("O"): "O",
    ord("S"): "S",
    ord("D"): "D",
    ord(" "): "space",
}


def _finish(fb: FontBuilder, glyph_order: list[str], path: Path) -> Path:
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupNameTable({"familyName": "Outline Test", "styleName": "Regular"})
    fb.setupPost()
    fb.save(str(path))
    return path


def build_truetype_font(path: Path) -> Path:
    """Build a TrueType font with square, ring, implied-point and composite glyphs.

    "D" is a composite of "A" shifted right by 200 units.
    """
    glyph_order = [".notdef", "space", "A", "O", "S", "D"]
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(TTF_CMAP)

    glyphs: dict[str, Any] = {}
    for name in glyph_order:
        pen = TTGlyphPen(glyphs)
        if name in TTF_DRAWINGS:
            TTF_DRAWINGS[name](pen)
        elif name == "D":
            pen.addComponent("A", (1, 0, 0, 1, 200, 0))
        glyphs[name] = pen.glyph()
    fb.setupGlyf(glyphs)

    return _finish(fb, glyph_order, path)


def build_cff_font(path: Path) -> Path:
    """Build a CFF-flavoured OpenType font with a cubic glyph and a square."""
    glyph_order = [".notdef", "A", "C"]
    drawings = {"A": draw_square, "C": draw_cubic}
    fb = FontBuilder(1000, isTTF=False)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("A"): "A", ord("C"): "C"})

    charstrings = {}
    for name in glyph_order:
        pen = T2CharStringPen(600, None)
        if name in drawings:
            drawings[name](pen)
        charstrings[name] = pen.getCharString()
    fb.setupCFF(
        psName="OutlineTestCFF-Regular",
        fontInfo={"FullName": "Outline Test CFF"},
        charStringsDict=charstrings,
        privateDict={},
    )

    return _finish(fb, glyph_order, path)


@pytest.fixture
def truetype_font(tmp_path: Path) -> Path:
    """Path to a generated TrueType font."""
    return build_truetype_font(tmp_path / "OutlineTest.ttf")


@pytest.fixture
def cff_font(tmp_path: Path) -> Path:
    """Path to a generated CFF OpenType font."""
    return build_cff_font(tmp_path / "OutlineTest.otf")


@pytest.fixture
def outlineless_font(tmp_path: Path) -> Path:
    """Path to a font whose outline tables were removed."""
    from fontTools.ttLib import TTFont

    source = build_truetype_font(tmp_path / "source.ttf")
    font = TTFont(str(source))
    del font["glyf"]
    del font["loca"]
    target = tmp_path / "NoOutlines.ttf"
    font.save(str(target))
    font.close()
    return target


@pytest.fixture
def not_a_font(tmp_path: Path) -> Path:
    """Path to a text file."""
    path = tmp_path / "readme.ttf"
    path.write_text("This is not a font file.\n", encoding="utf-8")
    return path
