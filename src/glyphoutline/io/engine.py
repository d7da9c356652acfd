"""Font engine backed by fontTools.

This module provides the FontEngine and FontFace classes: the boundary the
extraction pipeline uses to open a font, map a character to a glyph index,
load the glyph and obtain its unscaled Outline.
"""

from dataclasses import dataclass
from enum import Enum, Flag, auto
from pathlib import Path
from typing import Any

import structlog
from fontTools.misc.roundTools import otRound
from fontTools.pens.basePen import decomposeSuperBezierSegment
from fontTools.pens.recordingPen import RecordingPen
from fontTools.ttLib import TTFont
from fontTools.ttLib.tables._g_l_y_f import flagCubic, flagOnCurve
from pydantic import ValidationError

from glyphoutline.config import EngineConfig
from glyphoutline.domain.segment import VectorPoint
from glyphoutline.exceptions import (
    EngineInitError,
    FontOpenError,
    GlyphLoadError,
    UnsupportedFontFormatError,
)
from glyphoutline.io.outline import Outline, PointTag

# First four bytes of the font containers fontTools can open
SFNT_SIGNATURES = frozenset(
    {b"\x00\x01\x00\x00", b"OTTO", b"true", b"ttcf", b"wOFF", b"wOF2"}
)
OUTLINE_TABLES = ("glyf", "CFF ", "CFF2")
BITMAP_TABLES = ("CBDT", "EBDT", "sbix")


class GlyphFormat(Enum):
    """Format of a loaded glyph image."""

    OUTLINE = "outline"
    BITMAP = "bitmap"
    NONE = "none"


class LoadFlags(Flag):
    """Glyph loading options."""

    DEFAULT = 0
    NO_SCALE = auto()
    NO_HINTING = auto()


UNSCALED = LoadFlags.NO_SCALE | LoadFlags.NO_HINTING


@dataclass(frozen=True)
class GlyphSlot:
    """A loaded glyph.

    Attributes:
        index: Glyph index in the font
        name: Glyph name
        format: Format of the glyph image
        outline: Unscaled outline (None unless format is OUTLINE)
    """

    index: int
    name: str
    format: GlyphFormat
    outline: Outline | None = None


def _point(pt: tuple[float, float]) -> VectorPoint:
    return VectorPoint(otRound(pt[0]), otRound(pt[1]))


def _tag_from_flag(flag: int) -> PointTag:
    if flag & flagOnCurve:
        return PointTag.ON
    if flag & flagCubic:
        return PointTag.CUBIC
    return PointTag.CONIC


def truetype_outline(glyf_table: Any, glyph_name: str) -> Outline:
    """Build an Outline from a TrueType glyph.

    Composite glyphs are resolved into their component outlines.

    Args:
        glyf_table: The font's 'glyf' table
        glyph_name: Name of the glyph to read

    Returns:
        Outline with the glyph's points, tags and contour ends
    """
    glyph = glyf_table[glyph_name]
    coordinates, end_points, flags = glyph.getCoordinates(glyf_table)
    return Outline(
        points=tuple(_point(pt) for pt in coordinates),
        tags=tuple(_tag_from_flag(flag) for flag in flags),
        contour_ends=tuple(end_points),
    )


class _OutlineBuilder:
    """Accumulates pen commands into outline points and tags."""

    def __init__(self) -> None:
        self.points: list[VectorPoint] = []
        self.tags: list[PointTag] = []
        self.contour_ends: list[int] = []
        self._contour_start: int | None = None

    def add(self, pt: tuple[float, float], tag: PointTag) -> None:
        self.points.append(_point(pt))
        self.tags.append(tag)

    def open_contour(self) -> None:
        self.close_contour()
        self._contour_start = len(self.points)

    def require_contour(self, command: str) -> None:
        if self._contour_start is None:
            raise ValueError(f"'{command}' before 'moveTo'")

    def close_contour(self) -> None:
        start = self._contour_start
        if start is None:
            return
        # An explicit closing point on top of the start point is redundant
        if (
            len(self.points) - start > 1
            and self.tags[-1] is PointTag.ON
            and self.points[-1] == self.points[start]
        ):
            self.points.pop()
            self.tags.pop()
        if len(self.points) > start:
            self.contour_ends.append(len(self.points) - 1)
        self._contour_start = None

    def build(self) -> Outline:
        self.close_contour()
        return Outline(
            points=tuple(self.points),
            tags=tuple(self.tags),
            contour_ends=tuple(self.contour_ends),
        )


def outline_from_recording(recording: list[tuple[str, tuple[Any, ...]]]) -> Outline:
    """Convert RecordingPen recording to an Outline.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic, may end with None
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ())

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        Outline built from the commands

    Raises:
        ValueError: If the commands do not describe contours
    """
    builder = _OutlineBuilder()

    for command, args in recording:
        if command == "moveTo":
            builder.open_contour()
            builder.add(args[0], PointTag.ON)
        elif command == "lineTo":
            builder.require_contour(command)
            builder.add(args[0], PointTag.ON)
        elif command == "curveTo":
            builder.require_contour(command)
            if len(args) < 3:
                raise ValueError(f"'curveTo' needs two control points, got {len(args) - 1}")
            segments = [args] if len(args) == 3 else decomposeSuperBezierSegment(args)
            for control1, control2, end in segments:
                builder.add(control1, PointTag.CUBIC)
                builder.add(control2, PointTag.CUBIC)
                builder.add(end, PointTag.ON)
        elif command == "qCurveTo":
            *controls, end = args
            if end is None:
                # Contour made only of off-curve points
                builder.open_contour()
            else:
                builder.require_contour(command)
            for control in controls:
                builder.add(control, PointTag.CONIC)
            if end is not None:
                builder.add(end, PointTag.ON)
        elif command in ("closePath", "endPath"):
            builder.close_contour()
        else:
            raise ValueError(f"Unsupported drawing command '{command}'")

    return builder.build()


class FontFace:
    """An opened font face.

    Example:
        with engine.open_font(Path("font.ttf")) as face:
            slot = face.load_glyph(face.char_index("A"))
    """

    def __init__(
        self,
        font: TTFont,
        path: Path,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._font: TTFont | None = font
        self._path = path
        self._logger = logger or structlog.get_logger("glyphoutline.engine")
        self._cmap: dict[int, str] = font.getBestCmap() or {}

    @property
    def path(self) -> Path:
        """Path the face was opened from."""
        return self._path

    @property
    def font(self) -> TTFont:
        """Underlying fontTools font.

        Raises:
            RuntimeError: If the face has been closed
        """
        if self._font is None:
            raise RuntimeError("Font face is closed.")
        return self._font

    @property
    def glyph_format(self) -> GlyphFormat:
        """Format glyphs of this face load as.

        Outline tables win over bitmap tables, as unscaled loading never
        uses embedded bitmaps.
        """
        font = self.font
        if any(tag in font for tag in OUTLINE_TABLES):
            return GlyphFormat.OUTLINE
        if any(tag in font for tag in BITMAP_TABLES):
            return GlyphFormat.BITMAP
        return GlyphFormat.NONE

    @property
    def glyph_count(self) -> int:
        """Total number of glyphs in the face."""
        return len(self.font.getGlyphOrder())

    def char_index(self, character: str) -> int:
        """Map a character to its glyph index.

        Args:
            character: A single character

        Returns:
            Glyph index, or 0 if the character is not mapped
        """
        glyph_name = self._cmap.get(ord(character))
        if glyph_name is None:
            return 0
        return self.font.getGlyphID(glyph_name)

    def load_glyph(self, glyph_index: int, flags: LoadFlags = UNSCALED) -> GlyphSlot:
        """Load a glyph by index.

        Args:
            glyph_index: Index of the glyph to load
            flags: Load options; NO_SCALE is required

        Returns:
            GlyphSlot holding the glyph's outline when it has one

        Raises:
            GlyphLoadError: If the glyph cannot be loaded
        """
        if LoadFlags.NO_SCALE not in flags:
            raise GlyphLoadError(glyph_index, "only unscaled loading is supported")

        font = self.font
        glyph_order = font.getGlyphOrder()
        if not 0 <= glyph_index < len(glyph_order):
            raise GlyphLoadError(
                glyph_index, f"index out of range (font has {len(glyph_order)} glyphs)"
            )

        glyph_name = glyph_order[glyph_index]
        glyph_format = self.glyph_format
        if glyph_format is not GlyphFormat.OUTLINE:
            return GlyphSlot(glyph_index, glyph_name, glyph_format)

        try:
            if "glyf" in font:
                outline = truetype_outline(font["glyf"], glyph_name)
            else:
                pen = RecordingPen()
                font.getGlyphSet()[glyph_name].draw(pen)
                outline = outline_from_recording(pen.value)
        except Exception as e:
            raise GlyphLoadError(glyph_index, str(e)) from e

        self._logger.debug(
            "Glyph loaded",
            glyph=glyph_name,
            index=glyph_index,
            contours=outline.contour_count,
            points=outline.point_count,
        )
        return GlyphSlot(glyph_index, glyph_name, glyph_format, outline)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
            self._logger.debug("Font face released", path=str(self._path))

    def __enter__(self) -> "FontFace":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


class FontEngine:
    """Opens font faces and tracks them until released.

    Faces still open when the engine closes are released first.

    Example:
        with FontEngine() as engine:
            face = engine.open_font(Path("font.ttf"))
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._config = config or EngineConfig()
        self._logger = logger or structlog.get_logger("glyphoutline.engine")
        self._faces: list[FontFace] = []
        self._closed = False

    @staticmethod
    def configure(face_index: int = 0) -> EngineConfig:
        """Validate raw engine settings.

        Args:
            face_index: Face to open inside font collections

        Returns:
            Validated EngineConfig

        Raises:
            EngineInitError: If the settings are invalid
        """
        try:
            return EngineConfig(face_index=face_index)
        except ValidationError as e:
            reason = "; ".join(f"face_index: {error['msg']}" for error in e.errors())
            raise EngineInitError(reason) from e

    @classmethod
    def from_settings(
        cls,
        face_index: int = 0,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> "FontEngine":
        """Initialize an engine from raw settings.

        Args:
            face_index: Face to open inside font collections
            logger: Logger for engine events

        Returns:
            Initialized FontEngine

        Raises:
            EngineInitError: If the settings are invalid
        """
        return cls(cls.configure(face_index), logger=logger)

    @property
    def config(self) -> EngineConfig:
        """Engine configuration."""
        return self._config

    def open_font(self, path: Path) -> FontFace:
        """Open a font file.

        Args:
            path: Path to a TTF, OTF, TTC or WOFF font

        Returns:
            Opened FontFace

        Raises:
            FontOpenError: If the file cannot be opened or parsed
            UnsupportedFontFormatError: If the file is not a font format
            RuntimeError: If the engine has been closed
        """
        if self._closed:
            raise RuntimeError("Font engine is closed.")

        try:
            with path.open("rb") as f:
                signature = f.read(4)
        except OSError as e:
            raise FontOpenError(str(path), e.strerror or str(e)) from e

        if signature not in SFNT_SIGNATURES:
            raise UnsupportedFontFormatError(
                str(path), f"unrecognized signature {signature!r}"
            )
        if signature != b"ttcf" and self._config.face_index != 0:
            raise FontOpenError(
                str(path),
                f"face index {self._config.face_index} requested but the file holds one face",
            )

        try:
            font = TTFont(str(path), fontNumber=self._config.face_index)
            face = FontFace(font, path, logger=self._logger)
        except Exception as e:
            raise FontOpenError(str(path), str(e)) from e

        self._faces.append(face)
        self._logger.debug(
            "Font opened",
            path=str(path),
            face_index=self._config.face_index,
            glyphs=face.glyph_count,
            format=face.glyph_format.value,
        )
        return face

    def close(self) -> None:
        """Release all faces, then the engine."""
        if self._closed:
            return
        for face in reversed(self._faces):
            face.close()
        self._faces.clear()
        self._closed = True
        self._logger.debug("Font engine released")

    def __enter__(self) -> "FontEngine":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
