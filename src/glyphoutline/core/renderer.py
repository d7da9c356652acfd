"""Fixed-width text rendering of glyph paths."""

from collections.abc import Iterator
from pathlib import Path

from glyphoutline.config import RenderConfig
from glyphoutline.domain import GlyphPath, PathSegment, SegmentKind, VectorPoint


class PathRenderer:
    """Formats a GlyphPath as aligned, human-readable text.

    Each contour gets a header with its 1-based index, followed by one line
    per segment:

        Contour # 1
           MoveTo (    0,     0)
           QuadTo (  150,    50) (  100,   100)
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or RenderConfig()

    def format_point(self, point: VectorPoint) -> str:
        """Format a point as `(x, y)` with right-aligned coordinates."""
        width = self._config.coordinate_width
        return f"({point.x:>{width}}, {point.y:>{width}})"

    def format_segment(self, segment: PathSegment) -> str:
        """Format a segment without indentation.

        The control point is only printed for QuadTo segments.
        """
        if segment.kind is SegmentKind.QUAD_TO:
            return (
                f"{segment.kind.label} "
                f"{self.format_point(segment.control)} {self.format_point(segment.end)}"
            )
        return f"{segment.kind.label} {self.format_point(segment.end)}"

    def render_lines(self, path: GlyphPath) -> Iterator[str]:
        """Yield the rendered lines of a path."""
        contour_indent = " " * self._config.contour_indent
        segment_indent = " " * self._config.segment_indent
        width = self._config.index_width

        for number, contour in enumerate(path, start=1):
            yield f"{contour_indent}Contour #{number:>{width}}"
            for segment in contour:
                yield f"{segment_indent}{self.format_segment(segment)}"

    def render(self, path: GlyphPath) -> str:
        """Render a path as text, one line per contour header or segment."""
        return "\n".join(self.render_lines(path))

    def render_report(self, path: GlyphPath, character: str, font_path: Path | str) -> str:
        """Render a path with the banner naming its character and font.

        Args:
            path: Path to render
            character: Character the path was extracted for
            font_path: Font the path was extracted from

        Returns:
            Banner lines followed by the rendered path
        """
        lines = [
            f"// Successfully extracted vector data for character '{character}' "
            f"from {font_path}.",
            "// Extracted Glyph Path:",
        ]
        lines.extend(self.render_lines(path))
        return "\n".join(lines)
