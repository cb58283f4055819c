"""Glyph representation and metadata.

This module defines the glyph domain model, which pairs a glyph's outline
with the metadata needed to place it in a line of text.
"""

from dataclasses import dataclass

from glyphpath.domain.outline import Outline


@dataclass
class GlyphMetadata:
    """Metadata about a glyph.

    Attributes:
        name: Glyph name (e.g., "A", "B", "exclam")
        unicode: Unicode code point (None for unencoded glyphs)
        advance_width: Horizontal advance width in font units
        left_side_bearing: Left side bearing in font units
    """

    name: str
    unicode: int | None
    advance_width: int
    left_side_bearing: int


@dataclass
class Glyph:
    """A single glyph with its outline.

    Attributes:
        metadata: Glyph metadata (name, unicode, metrics)
        outline: Outline with the vertical axis already flipped for SVG
    """

    metadata: GlyphMetadata
    outline: Outline

    @property
    def name(self) -> str:
        """Get glyph name from metadata."""
        return self.metadata.name

    def is_empty(self) -> bool:
        """Check if glyph has no outline.

        Empty glyphs include spaces and other non-printing characters.

        Returns:
            True if glyph has no points or no contours
        """
        return self.outline.is_empty()
