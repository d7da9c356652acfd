"""Path reconstruction from decomposition events.

The PathReconstructor is the visitor handed to decompose_outline. It mirrors
the event stream into a GlyphPath, one contour per move_to, preserving order.
"""

import structlog

from glyphoutline.domain import Contour, GlyphPath, PathSegment, VectorPoint
from glyphoutline.exceptions import PathStructureError


class PathReconstructor:
    """Accumulates decomposition events into a GlyphPath.

    The reconstructor owns the in-progress path exclusively. Edges are
    appended to the contour opened by the most recent move_to; an edge with
    no open contour is rejected. Cubic arcs are counted and dropped.

    Example:
        reconstructor = PathReconstructor()
        decompose_outline(outline, reconstructor)
        path = reconstructor.result()
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or structlog.get_logger("glyphoutline.reconstructor")
        self._contours: list[list[PathSegment]] = []
        self._current: list[PathSegment] | None = None
        self._skipped_cubics = 0
        self._finished = False

    @property
    def skipped_cubics(self) -> int:
        """Number of cubic arcs dropped so far."""
        return self._skipped_cubics

    def move_to(self, point: VectorPoint) -> None:
        """Open a new contour starting at `point`."""
        self._check_open("move_to")
        self._current = [PathSegment.move_to(point)]
        self._contours.append(self._current)

    def line_to(self, point: VectorPoint) -> None:
        """Append a straight edge to the open contour."""
        self._open_contour("line_to").append(PathSegment.line_to(point))

    def quad_to(self, control: VectorPoint, end: VectorPoint) -> None:
        """Append a quadratic arc to the open contour."""
        self._open_contour("quad_to").append(PathSegment.quad_to(control, end))

    def cubic_to(
        self, control1: VectorPoint, control2: VectorPoint, end: VectorPoint
    ) -> None:
        """Drop a cubic arc.

        Cubic curves have no segment kind; the arc is left out of the path
        without raising.
        """
        self._check_open("cubic_to")
        self._skipped_cubics += 1
        self._logger.debug(
            "Cubic arc dropped",
            control1=control1.to_tuple(),
            control2=control2.to_tuple(),
            end=end.to_tuple(),
        )

    def result(self) -> GlyphPath:
        """Finish reconstruction and return the immutable path.

        Returns:
            GlyphPath with the contours in event order
        """
        self._finished = True
        self._current = None
        path = GlyphPath(tuple(Contour(tuple(segments)) for segments in self._contours))
        self._logger.debug(
            "Path reconstructed",
            contours=path.contour_count,
            segments=path.segment_count,
            skipped_cubics=self._skipped_cubics,
        )
        return path

    def _check_open(self, event: str) -> None:
        if self._finished:
            raise RuntimeError(f"'{event}' received after result() was taken")

    def _open_contour(self, event: str) -> list[PathSegment]:
        self._check_open(event)
        if self._current is None:
            raise PathStructureError(event)
        return self._current
