"""Core algorithms for glyphoutline.

This module contains:

- Path reconstruction (decomposition events -> GlyphPath)
- Path rendering (GlyphPath -> aligned text)
- The extraction pipeline tying the font engine to both

Key classes:
- PathReconstructor: Visitor building a GlyphPath from outline events
- PathRenderer: Fixed-width text formatter
- GlyphPathExtractor: Pipeline for one character of one font
"""

from glyphoutline.core.extractor import GlyphPathExtractor, extract_glyph_path
from glyphoutline.core.reconstructor import PathReconstructor
from glyphoutline.core.renderer import PathRenderer

__all__ = [
    "GlyphPathExtractor",
    "PathReconstructor",
    "PathRenderer",
    "extract_glyph_path",
]
