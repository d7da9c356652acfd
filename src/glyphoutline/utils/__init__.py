"""Utility functions for glyphoutline.

This module provides utility functions including:

- Logging setup and configuration
- Extraction statistics
"""

from glyphoutline.utils.logging import (
    ExtractionLogger,
    ExtractionStats,
    configure_logging,
)

__all__ = [
    "ExtractionLogger",
    "ExtractionStats",
    "configure_logging",
]
