"""Domain models for glyphoutline.

This module contains the structured path built from a glyph outline.
All models are immutable (frozen dataclasses) and independent of the
font engine.

Key classes:
- VectorPoint: An integer point in font design units
- PathSegment: A MoveTo, LineTo or QuadTo command
- Contour: One closed sub-path starting with a MoveTo
- GlyphPath: The ordered contours of one glyph
"""

from glyphoutline.domain.path import Contour, GlyphPath
from glyphoutline.domain.segment import ORIGIN, PathSegment, SegmentKind, VectorPoint

__all__: list[str] = [
    # Enums
    "SegmentKind",
    # Core types
    "ORIGIN",
    "VectorPoint",
    "PathSegment",
    "Contour",
    "GlyphPath",
]
