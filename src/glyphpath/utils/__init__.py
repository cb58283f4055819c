"""Utility functions for glyphpath.

This module provides utility functions including:

- Logging setup and configuration
- Conversion statistics tracking
- The no-op logger used as the builder's default debug sink
"""

from glyphpath.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
    null_logger,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
    "null_logger",
]
