"""Configuration management for glyphoutline.

This module provides configuration management using Pydantic models.
Configuration is provided via CLI arguments or defaults.

Key classes:
- EngineConfig: Font engine settings
- RenderConfig: Path rendering layout
- LoggingConfig: Logging settings
- GlyphOutlineSettings: Main application settings
"""

from glyphoutline.config.settings import (
    EngineConfig,
    GlyphOutlineSettings,
    LoggingConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "EngineConfig",
    "GlyphOutlineSettings",
    "LoggingConfig",
    "RenderConfig",
    "get_default_settings",
]
