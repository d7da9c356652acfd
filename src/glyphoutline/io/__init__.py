"""Font engine layer for glyphoutline.

This module handles opening font files and loading glyph outlines using
fonttools. It provides the boundary between fonttools and the path
reconstruction code.

Key responsibilities:
- Open TTF/OTF/TTC/WOFF fonts
- Map characters to glyph indices
- Load unscaled glyph outlines (points with on/off-curve tags)
- Decompose outlines into move/line/curve events

Key classes:
- FontEngine: Open fonts and release them
- FontFace: Character lookup and glyph loading
- Outline: Points, tags and contour ends of a loaded glyph
"""

from glyphoutline.io.engine import (
    UNSCALED,
    FontEngine,
    FontFace,
    GlyphFormat,
    GlyphSlot,
    LoadFlags,
)
from glyphoutline.io.outline import Outline, OutlineVisitor, PointTag, decompose_outline

__all__ = [
    "UNSCALED",
    "FontEngine",
    "FontFace",
    "GlyphFormat",
    "GlyphSlot",
    "LoadFlags",
    "Outline",
    "OutlineVisitor",
    "PointTag",
    "decompose_outline",
]
