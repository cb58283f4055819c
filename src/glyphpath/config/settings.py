"""Configuration settings for glyphpath."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class Overlay(str, Enum):
    """Debug overlays that can be drawn under the glyph paths."""

    BORDER = "border"
    AXES = "axes"
    POINTS = "points"
    LINES = "lines"
    LABELS = "labels"
    TYPOGRAPHY = "typography"


class LogLevel(str, Enum):
    """Log levels accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class TessellationConfig(BaseModel):
    """Configuration for curve output."""

    emit_curves: bool = Field(
        default=True,
        description="Emit quadratic curve commands (False = tessellate into lines)",
    )
    step: float = Field(
        default=0.1,
        gt=0.0,
        le=1.0,
        description="Parameter increment used when sampling curves",
    )

    @property
    def samples_per_curve(self) -> int:
        """Number of line segments each curve expands to."""
        count = 0
        while count * self.step < 1.0:
            count += 1
        return count


class LayoutConfig(BaseModel):
    """Configuration for placing the glyphs of a message."""

    advance_factor: float = Field(
        default=1.1,
        gt=0.0,
        le=4.0,
        description="Multiplier applied to each glyph's advance width",
    )
    fallback_advance: float = Field(
        default=200.0,
        ge=0.0,
        description="Advance used for glyphs without a positive advance width",
    )


class PathStyle(BaseModel):
    """Presentation attributes of each glyph path."""

    fill: str = Field(default="black")
    stroke: str = Field(default="black")
    fill_opacity: float = Field(default=0.45, ge=0.0, le=1.0)
    stroke_width: float = Field(default=2.0, ge=0.0)


class DocumentConfig(BaseModel):
    """Configuration for SVG document output."""

    style: PathStyle = Field(default_factory=PathStyle)
    margin: int = Field(
        default=100,
        ge=0,
        description="Space around the glyphs in font units",
    )
    overlays: list[Overlay] = Field(
        default_factory=list,
        description="Debug overlays to draw",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class GlyphPathSettings(BaseModel):
    """Main application settings."""

    tessellation: TessellationConfig = Field(default_factory=TessellationConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    document: DocumentConfig = Field(default_factory=DocumentConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphPathSettings:
    """Get default application settings."""
    return GlyphPathSettings()
