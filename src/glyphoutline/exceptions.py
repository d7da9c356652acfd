"""Exception hierarchy for glyphoutline.

Every failure is terminal: the stage that detects it raises one of these,
and the CLI reports it once and exits with status 1.
"""


class GlyphOutlineError(Exception):
    """Base exception for all glyphoutline errors."""

    stage = "unknown"


class UsageError(GlyphOutlineError):
    """Command-line arguments were not a font path and a single character."""

    stage = "usage"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class LogFileError(GlyphOutlineError):
    """The requested log file could not be opened for writing."""

    stage = "logging"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open log file '{path}': {reason}")


class EngineInitError(GlyphOutlineError):
    """The font engine could not be initialized."""

    stage = "engine"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not initialize font engine: {reason}")


class FontError(GlyphOutlineError):
    """Errors related to opening a font file."""

    stage = "open"


class UnsupportedFontFormatError(FontError):
    """The file was opened but its format is not a supported font format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(
            f"The font file '{path}' could be opened but its format is unsupported: {details}"
        )


class FontOpenError(FontError):
    """The font file could not be opened or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open or process font file '{path}': {reason}")


class GlyphError(GlyphOutlineError):
    """Errors related to resolving or loading a glyph."""

    pass


class GlyphNotFoundError(GlyphError):
    """The character has no glyph mapped in the font."""

    stage = "lookup"

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"Glyph not found for character '{character}'")


class GlyphLoadError(GlyphError):
    """The engine failed to load the resolved glyph."""

    stage = "load"

    def __init__(self, glyph_index: int, reason: str) -> None:
        self.glyph_index = glyph_index
        self.reason = reason
        super().__init__(f"Could not load glyph {glyph_index}: {reason}")


class NonOutlineGlyphError(GlyphError):
    """The loaded glyph is not a vector outline."""

    stage = "format"

    def __init__(self, glyph_name: str, glyph_format: str) -> None:
        self.glyph_name = glyph_name
        self.glyph_format = glyph_format
        super().__init__(
            f"Glyph format is not an outline: '{glyph_name}' is {glyph_format}"
        )


class DecompositionError(GlyphOutlineError):
    """The outline walk reported a failure."""

    stage = "decompose"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not decompose glyph outline: {reason}")


class PathStructureError(DecompositionError):
    """An edge event arrived while no contour was open."""

    def __init__(self, event: str) -> None:
        self.event = event
        super().__init__(f"'{event}' received before any 'move_to'")
