"""Core geometric types for path segments.

This module defines the primitive types a glyph path is built from:
- VectorPoint: An integer point in font design units
- SegmentKind: Enum for the kind of path command
- PathSegment: One typed path command with its coordinates
"""

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    """Kind of path segment.

    Cubic curves are part of the decomposition protocol but are never
    materialized as segments, so there is no kind for them.
    """

    MOVE_TO = "MoveTo"
    LINE_TO = "LineTo"
    QUAD_TO = "QuadTo"

    @property
    def label(self) -> str:
        """Label used when rendering the segment."""
        return self.value


@dataclass(frozen=True, slots=True)
class VectorPoint:
    """A point in font design units.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


ORIGIN = VectorPoint(0, 0)


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A single path command.

    The control point is only meaningful for QUAD_TO segments; MOVE_TO and
    LINE_TO segments always carry ORIGIN there.

    Attributes:
        kind: Kind of the segment
        end: End point of the segment
        control: Quadratic control point (ORIGIN unless kind is QUAD_TO)
    """

    kind: SegmentKind
    end: VectorPoint
    control: VectorPoint = ORIGIN

    @classmethod
    def move_to(cls, end: VectorPoint) -> "PathSegment":
        """Create a MOVE_TO segment opening a contour at `end`."""
        return cls(SegmentKind.MOVE_TO, end)

    @classmethod
    def line_to(cls, end: VectorPoint) -> "PathSegment":
        """Create a LINE_TO segment."""
        return cls(SegmentKind.LINE_TO, end)

    @classmethod
    def quad_to(cls, control: VectorPoint, end: VectorPoint) -> "PathSegment":
        """Create a QUAD_TO segment.

        Args:
            control: Quadratic Bezier control point
            end: End point of the arc

        Returns:
            PathSegment of kind QUAD_TO
        """
        return cls(SegmentKind.QUAD_TO, end, control)

    @property
    def is_curve(self) -> bool:
        """Whether this segment carries curve data."""
        return self.kind is SegmentKind.QUAD_TO
