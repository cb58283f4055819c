"""Domain models for glyphpath.

This module contains the value types shared by the reader, the path builder
and the document writer. All models are:

- Immutable where possible (using frozen dataclasses)
- Independent of fonttools implementation details

Key classes:
- OutlinePoint: A point in design units with an on-curve flag
- Outline: Flat point list split into contours by end indices
- MoveTo, LineTo, QuadCurveTo, ClosePath: Path commands
- Path: Ordered command list produced per conversion
- Glyph: A glyph's outline with its metadata
"""

from glyphpath.domain.glyph import Glyph, GlyphMetadata
from glyphpath.domain.outline import Outline, OutlinePoint
from glyphpath.domain.path import (
    ClosePath,
    LineTo,
    MoveTo,
    Path,
    PathCommand,
    QuadCurveTo,
)

__all__: list[str] = [
    # Outline types
    "OutlinePoint",
    "Outline",
    # Path types
    "MoveTo",
    "LineTo",
    "QuadCurveTo",
    "ClosePath",
    "PathCommand",
    "Path",
    # Glyph types
    "GlyphMetadata",
    "Glyph",
]
