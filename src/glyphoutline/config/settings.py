"""Configuration settings for glyphoutline."""

from pathlib import Path

from pydantic import BaseModel, Field


class EngineConfig(BaseModel):
    """Configuration for the font engine."""

    face_index: int = Field(
        default=0,
        ge=0,
        description="Face to open inside a font collection (TTC/OTC)",
    )


class RenderConfig(BaseModel):
    """Layout of the textual path rendering.

    Widths are minimum field widths; values are right-aligned and never
    truncated.
    """

    index_width: int = Field(
        default=2,
        ge=1,
        le=10,
        description="Field width of the 1-based contour index",
    )
    coordinate_width: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Field width of each coordinate",
    )
    contour_indent: int = Field(
        default=3,
        ge=0,
        description="Leading spaces before a contour header",
    )
    segment_indent: int = Field(
        default=6,
        ge=0,
        description="Leading spaces before a segment line",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console (stderr) log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphOutlineSettings(BaseModel):
    """Main application settings."""

    engine: EngineConfig = Field(default_factory=EngineConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphOutlineSettings:
    """Get default application settings."""
    return GlyphOutlineSettings()
