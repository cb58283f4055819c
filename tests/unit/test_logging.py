"""Tests for logging utilities."""

import structlog
from structlog.testing import LogCapture

from glyphpath.utils.logging import ConversionLogger, ConversionStats, null_logger


def capturing_logger() -> tuple[structlog.BoundLogger, LogCapture]:
    capture = LogCapture()
    logger = structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=[capture],
        wrapper_class=structlog.BoundLogger,
    )
    return logger, capture


class TestNullLogger:
    """Tests for the no-op logger."""

    def test_discards_events(self, capsys) -> None:
        """Test logging through the null logger prints nothing."""
        logger = null_logger()
        logger.debug("hidden", value=1)
        logger.error("also hidden")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_bind(self) -> None:
        """Test bound loggers stay silent."""
        assert null_logger().bind(glyph="a").info("x") is None


class TestConversionStats:
    """Tests for ConversionStats."""

    def test_duration(self) -> None:
        """Test duration from start and end times."""
        stats = ConversionStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5

    def test_duration_unset(self) -> None:
        """Test duration is zero before the run ends."""
        assert ConversionStats(start_time=10.0).duration_seconds == 0.0


class TestConversionLogger:
    """Tests for ConversionLogger."""

    def test_counts(self) -> None:
        """Test converted, empty and failed glyphs are counted."""
        logger, capture = capturing_logger()
        conversion_logger = ConversionLogger(logger)

        conversion_logger.log_glyph_complete("A", contours=2, commands=10, duration_ms=1.234)
        conversion_logger.log_glyph_complete("o", contours=1, commands=6, duration_ms=0.5)
        conversion_logger.log_glyph_empty("space", "font had 0 points")
        conversion_logger.log_glyph_error("Aacute", ValueError("composite"))

        stats = conversion_logger.stats
        assert stats.converted_count == 2
        assert stats.commands_emitted == 16
        assert stats.empty_count == 1
        assert stats.error_count == 1
        assert stats.errors == [("Aacute", "composite")]

        events = [e["event"] for e in capture.entries]
        assert events == [
            "Glyph converted",
            "Glyph converted",
            "Glyph empty",
            "Glyph conversion failed",
        ]
        assert capture.entries[0]["duration_ms"] == 1.23
        assert capture.entries[3]["error_type"] == "ValueError"
