"""Configuration management for glyphpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TessellationConfig: Curve output settings
- LayoutConfig: Message layout settings
- DocumentConfig: SVG output settings
- LoggingConfig: Logging settings
- GlyphPathSettings: Main application settings
"""

from glyphpath.config.settings import (
    DocumentConfig,
    GlyphPathSettings,
    LayoutConfig,
    LoggingConfig,
    LogLevel,
    Overlay,
    PathStyle,
    TessellationConfig,
    get_default_settings,
)

__all__ = [
    "DocumentConfig",
    "GlyphPathSettings",
    "LayoutConfig",
    "LoggingConfig",
    "LogLevel",
    "Overlay",
    "PathStyle",
    "TessellationConfig",
    "get_default_settings",
]
