"""Contour and glyph path representation.

This module defines the structured path produced by outline decomposition:
an ordered sequence of contours, each an ordered sequence of segments.
Both types are immutable once built.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from glyphoutline.domain.segment import PathSegment, SegmentKind, VectorPoint


@dataclass(frozen=True)
class Contour:
    """One closed sub-path of a glyph.

    A contour starts with exactly one MOVE_TO segment followed by LINE_TO
    and QUAD_TO segments. Closure back to the start point is implied and is
    not stored as a segment.

    Attributes:
        segments: Segments in drawing order
    """

    segments: tuple[PathSegment, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("A contour needs at least a MoveTo segment")
        if self.segments[0].kind is not SegmentKind.MOVE_TO:
            raise ValueError("A contour must start with a MoveTo segment")
        if any(s.kind is SegmentKind.MOVE_TO for s in self.segments[1:]):
            raise ValueError("A contour holds exactly one MoveTo segment")

    @property
    def start(self) -> VectorPoint:
        """Starting point of the contour."""
        return self.segments[0].end

    @property
    def edges(self) -> tuple[PathSegment, ...]:
        """Segments following the opening MoveTo."""
        return self.segments[1:]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(self.segments)


@dataclass(frozen=True)
class GlyphPath:
    """The complete path of one glyph.

    Contour order matches the source outline.

    Attributes:
        contours: Contours in outline order
    """

    contours: tuple[Contour, ...] = ()

    @property
    def contour_count(self) -> int:
        """Number of contours."""
        return len(self.contours)

    @property
    def segment_count(self) -> int:
        """Total number of segments across all contours."""
        return sum(len(contour) for contour in self.contours)

    def is_empty(self) -> bool:
        """Check if the path has no contours (e.g. a space glyph)."""
        return not self.contours

    def __len__(self) -> int:
        return len(self.contours)

    def __iter__(self) -> Iterator[Contour]:
        return iter(self.contours)
