"""Glyph path extraction pipeline.

This module coordinates the full extraction workflow for one character:
engine initialization, font opening, glyph lookup and loading, the outline
format check and decomposition into a GlyphPath.
"""

from pathlib import Path

import structlog

from glyphoutline.config import GlyphOutlineSettings, get_default_settings
from glyphoutline.core.reconstructor import PathReconstructor
from glyphoutline.domain import GlyphPath
from glyphoutline.exceptions import (
    GlyphNotFoundError,
    GlyphOutlineError,
    NonOutlineGlyphError,
    UsageError,
)
from glyphoutline.io import UNSCALED, FontEngine, GlyphFormat, decompose_outline
from glyphoutline.utils import ExtractionLogger, ExtractionStats


class GlyphPathExtractor:
    """Extracts the unscaled path of a single character from a font.

    Manages the complete workflow:
    1. Initialize the font engine
    2. Open the font face
    3. Map the character to a glyph index
    4. Load the glyph unscaled and unhinted
    5. Reject glyphs that are not outlines
    6. Decompose the outline into a GlyphPath

    The face is released before the engine on every exit path, and a
    failure at any stage leaves no partial path behind.

    Example:
        extractor = GlyphPathExtractor(GlyphOutlineSettings())
        path = extractor.extract(Path("font.ttf"), "A")
    """

    def __init__(
        self,
        settings: GlyphOutlineSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            settings: Application settings (defaults when None)
            logger: Logger for pipeline events
        """
        self.settings = settings or get_default_settings()
        self.logger = logger or structlog.get_logger("glyphoutline")
        self.extraction_logger = ExtractionLogger(self.logger)

    @property
    def stats(self) -> ExtractionStats:
        """Statistics of the last extraction."""
        return self.extraction_logger.stats

    def extract(self, font_path: Path, character: str) -> GlyphPath:
        """Extract the path of one character.

        Args:
            font_path: Path to the font file
            character: Exactly one character

        Returns:
            GlyphPath of the character's glyph

        Raises:
            GlyphOutlineError: Subclass naming the stage that failed
        """
        if len(character) != 1:
            raise UsageError(
                f"Expected a single character, got {len(character)}: '{character}'"
            )

        self.extraction_logger = ExtractionLogger(self.logger)
        self.extraction_logger.log_start(font_path, character)

        try:
            path, skipped_cubics = self._run(font_path, character)
        except GlyphOutlineError as e:
            self.extraction_logger.log_failure(e.stage, e)
            raise

        self.extraction_logger.log_complete(
            contour_count=path.contour_count,
            segment_count=path.segment_count,
            skipped_cubics=skipped_cubics,
        )
        return path

    def _run(self, font_path: Path, character: str) -> tuple[GlyphPath, int]:
        stages = self.extraction_logger

        with FontEngine.from_settings(
            face_index=self.settings.engine.face_index, logger=self.logger
        ) as engine:
            stages.log_stage("engine")

            with engine.open_font(font_path) as face:
                stages.log_stage("open", glyphs=face.glyph_count)

                glyph_index = face.char_index(character)
                if glyph_index == 0:
                    raise GlyphNotFoundError(character)
                stages.log_stage("lookup", glyph_index=glyph_index)

                slot = face.load_glyph(glyph_index, UNSCALED)
                stages.log_stage("load", glyph=slot.name)

                if slot.format is not GlyphFormat.OUTLINE or slot.outline is None:
                    raise NonOutlineGlyphError(slot.name, slot.format.value)
                stages.log_stage("format", format=slot.format.value)

                reconstructor = PathReconstructor(logger=self.logger)
                decompose_outline(slot.outline, reconstructor)
                path = reconstructor.result()
                stages.log_stage("decompose", contours=path.contour_count)

        return path, reconstructor.skipped_cubics


def extract_glyph_path(
    font_path: Path,
    character: str,
    settings: GlyphOutlineSettings | None = None,
) -> GlyphPath:
    """Extract the path of one character with default wiring.

    Args:
        font_path: Path to the font file
        character: Exactly one character
        settings: Application settings (defaults when None)

    Returns:
        GlyphPath of the character's glyph
    """
    return GlyphPathExtractor(settings).extract(font_path, character)
