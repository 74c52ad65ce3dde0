"""Logging utilities for Strokeplot."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

import structlog

_HANDLER_NAME = "strokeplot"


@dataclass
class RenderStats:
    """Statistics from a render pass."""

    characters_visited: int = 0
    glyphs_drawn: int = 0
    glyphs_skipped: int = 0
    segments_emitted: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so scripts written to stdout stay clean.
    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("strokeplot")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking a render pass and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_render_start(self, font_name: str, mode: str, scale: int) -> None:
        """Log start of a render pass."""
        self._stats.start_time = time.time()
        self._logger.info("Render started", font=font_name, mode=mode, scale=scale)

    def log_glyph_drawn(self, code: int, segments: int) -> None:
        """Log a drawn character."""
        self._logger.debug("Glyph drawn", code=code, segments=segments)
        self._stats.characters_visited += 1
        self._stats.glyphs_drawn += 1
        self._stats.segments_emitted += segments

    def log_glyph_skipped(self, code: int, reason: str) -> None:
        """Log a character that produced no glyph."""
        self._logger.debug("Glyph skipped", code=code, reason=reason)
        self._stats.characters_visited += 1
        self._stats.glyphs_skipped += 1

    def log_render_complete(self) -> None:
        """Log completion of a render pass."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Render complete",
            drawn=self._stats.glyphs_drawn,
            skipped=self._stats.glyphs_skipped,
            segments=self._stats.segments_emitted,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    def log_font_error(self, identifier: str, error: Exception) -> None:
        """Log a font resolution failure."""
        self._logger.error(
            "Font resolution failed",
            font=identifier,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
