"""Logging utilities for glyphpath."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class ConversionStats:
    """Statistics from a conversion run."""

    converted_count: int = 0
    empty_count: int = 0
    error_count: int = 0
    commands_emitted: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate conversion duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def _drop_event(_logger: Any, _method_name: str, _event_dict: dict[str, Any]) -> dict[str, Any]:
    raise structlog.DropEvent


def null_logger() -> structlog.BoundLogger:
    """Return a logger that discards every event.

    Used as the default debug sink of the path builder so that conversion
    never depends on global logging configuration.
    """
    return structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=[_drop_event],
        wrapper_class=structlog.BoundLogger,
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console output goes to stderr so that SVG written to stdout stays clean.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call in the same process
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

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

    logger = structlog.get_logger("glyphpath")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ConversionLogger:
    """Logger for tracking glyph conversion progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get the underlying structlog logger."""
        return self._logger

    def log_glyph_start(self, char: str, offset_x: float) -> None:
        """Log start of glyph conversion."""
        self._logger.debug("Converting glyph", char=char, offset_x=offset_x)

    def log_glyph_complete(
        self,
        glyph_name: str,
        contours: int,
        commands: int,
        duration_ms: float,
    ) -> None:
        """Log successful glyph conversion."""
        self._logger.info(
            "Glyph converted",
            glyph=glyph_name,
            contours=contours,
            commands=commands,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.converted_count += 1
        self._stats.commands_emitted += commands

    def log_glyph_empty(self, glyph_name: str, reason: str) -> None:
        """Log glyph with nothing to draw."""
        self._logger.debug("Glyph empty", glyph=glyph_name, reason=reason)
        self._stats.empty_count += 1

    def log_glyph_error(
        self,
        glyph_name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log glyph conversion error."""
        self._logger.error(
            "Glyph conversion failed",
            glyph=glyph_name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((glyph_name, str(error)))

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
