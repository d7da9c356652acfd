"""Engine-native outlines and their decomposition into path events.

An Outline is what the font engine hands over after loading a glyph: points
in font units, an on/off-curve tag per point and the index of the last point
of every contour. decompose_outline walks it and reports one event per
structural element to an OutlineVisitor, following the rules FreeType's
FT_Outline_Decompose uses so that the emitted stream (start points, implied
on-curve points, closing edges) matches what FreeType-based tools print.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

from glyphoutline.domain.segment import VectorPoint
from glyphoutline.exceptions import DecompositionError


class PointTag(Enum):
    """Tag of an outline point.

    - ON: Point on the curve
    - CONIC: Quadratic (TrueType) control point
    - CUBIC: Cubic (PostScript/CFF) control point
    """

    ON = auto()
    CONIC = auto()
    CUBIC = auto()


@dataclass(frozen=True)
class Outline:
    """Unscaled glyph outline as points with curve tags.

    Attributes:
        points: Outline points in font units
        tags: One tag per point
        contour_ends: Index of the last point of each contour
    """

    points: tuple[VectorPoint, ...] = ()
    tags: tuple[PointTag, ...] = ()
    contour_ends: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if len(self.points) != len(self.tags):
            raise ValueError(
                f"Outline has {len(self.points)} points but {len(self.tags)} tags"
            )

    @property
    def contour_count(self) -> int:
        """Number of contours in the outline."""
        return len(self.contour_ends)

    @property
    def point_count(self) -> int:
        """Number of points in the outline."""
        return len(self.points)


class OutlineVisitor(Protocol):
    """Receiver of decomposition events.

    move_to always opens a contour; the edges of that contour follow until
    the next move_to.
    """

    def move_to(self, point: VectorPoint) -> None: ...

    def line_to(self, point: VectorPoint) -> None: ...

    def quad_to(self, control: VectorPoint, end: VectorPoint) -> None: ...

    def cubic_to(
        self, control1: VectorPoint, control2: VectorPoint, end: VectorPoint
    ) -> None: ...


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -(-value // 2)


def _midpoint(a: VectorPoint, b: VectorPoint) -> VectorPoint:
    return VectorPoint(_half(a.x + b.x), _half(a.y + b.y))


def decompose_outline(outline: Outline, visitor: OutlineVisitor) -> None:
    """Walk an outline and report its contours to a visitor.

    Args:
        outline: Outline to walk
        visitor: Receiver of move/line/quad/cubic events

    Raises:
        DecompositionError: If the outline is malformed
    """
    first = 0
    for contour_index, last in enumerate(outline.contour_ends):
        if last < first or last >= outline.point_count:
            raise DecompositionError(
                f"contour {contour_index} ends at point {last}, "
                f"expected {first}..{outline.point_count - 1}"
            )
        _decompose_contour(
            outline.points[first : last + 1],
            outline.tags[first : last + 1],
            visitor,
            contour_index,
        )
        first = last + 1


def _decompose_contour(
    points: tuple[VectorPoint, ...],
    tags: tuple[PointTag, ...],
    visitor: OutlineVisitor,
    contour_index: int,
) -> None:
    """Emit the events of one contour.

    The contour is always closed: by a line back to the start point, or by
    the final arc when it ends on the start point.
    """
    start = points[0]
    end = len(points) - 1
    i = 1

    if tags[0] is PointTag.CUBIC:
        raise DecompositionError(
            f"contour {contour_index} starts with a cubic control point"
        )

    if tags[0] is PointTag.CONIC:
        if tags[-1] is PointTag.ON:
            start = points[-1]
            end -= 1
        else:
            start = _midpoint(points[0], points[-1])
        i = 0

    visitor.move_to(start)

    while i <= end:
        tag = tags[i]

        if tag is PointTag.ON:
            visitor.line_to(points[i])
            i += 1
            continue

        if tag is PointTag.CONIC:
            control = points[i]
            i += 1
            while i <= end:
                point, point_tag = points[i], tags[i]
                i += 1
                if point_tag is PointTag.ON:
                    visitor.quad_to(control, point)
                    break
                if point_tag is not PointTag.CONIC:
                    raise DecompositionError(
                        f"contour {contour_index} mixes quadratic and cubic control points"
                    )
                visitor.quad_to(control, _midpoint(control, point))
                control = point
            else:
                visitor.quad_to(control, start)
                return
            continue

        if i + 1 > end or tags[i + 1] is not PointTag.CUBIC:
            raise DecompositionError(
                f"contour {contour_index} has a lone cubic control point at {i}"
            )
        control1, control2 = points[i], points[i + 1]
        i += 2
        if i > end:
            visitor.cubic_to(control1, control2, start)
            return
        visitor.cubic_to(control1, control2, points[i])
        i += 1

    visitor.line_to(start)
