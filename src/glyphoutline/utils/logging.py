"""Logging utilities for glyphoutline."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

import structlog

from glyphoutline.exceptions import LogFileError

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class ExtractionStats:
    """Statistics from one extraction run."""

    contour_count: int = 0
    segment_count: int = 0
    skipped_cubics: int = 0
    failed_stage: str | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_ms(self) -> float:
        """Calculate extraction duration in milliseconds."""
        if self.start_time is not None and self.end_time is not None:
            return (self.end_time - self.start_time) * 1000
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console output goes to stderr so that stdout only carries the rendered
    path. A file handler is added when a log file is given.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for stderr output
        file_level: Logging level for file output

    Returns:
        Configured structlog logger

    Raises:
        LogFileError: If the log file cannot be opened
    """
    file_handler: logging.Handler | None = None
    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            raise LogFileError(str(log_file), e.strerror or str(e)) from e

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _installed_handlers.append(console_handler)

    if file_handler is not None:
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphoutline")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class ExtractionLogger:
    """Logger for tracking extraction stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ExtractionStats()

    def log_start(self, font_path: Path, character: str) -> None:
        """Log start of an extraction."""
        self._stats.start_time = time.time()
        self._logger.debug(
            "Extraction started",
            font=str(font_path),
            character=character,
            codepoint=f"U+{ord(character):04X}",
        )

    def log_stage(self, stage: str, **details: object) -> None:
        """Log completion of one pipeline stage."""
        self._logger.debug("Stage complete", stage=stage, **details)

    def log_complete(
        self,
        contour_count: int,
        segment_count: int,
        skipped_cubics: int,
    ) -> None:
        """Log successful extraction."""
        self._stats.end_time = time.time()
        self._stats.contour_count = contour_count
        self._stats.segment_count = segment_count
        self._stats.skipped_cubics = skipped_cubics
        self._logger.info(
            "Glyph path extracted",
            contours=contour_count,
            segments=segment_count,
            skipped_cubics=skipped_cubics,
            duration_ms=round(self._stats.duration_ms, 2),
        )

    def log_failure(self, stage: str, error: Exception) -> None:
        """Log a failed extraction."""
        self._stats.end_time = time.time()
        self._stats.failed_stage = stage
        self._logger.debug(
            "Extraction failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> ExtractionStats:
        """Get current extraction statistics."""
        return self._stats
