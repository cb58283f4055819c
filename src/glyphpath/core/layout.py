"""Message layout: place the glyphs of a string left to right.

Each character is converted at the current pen position. After each glyph
the pen moves right by the glyph's advance width scaled by
``LayoutConfig.advance_factor``; glyphs without a positive advance move the
pen by ``LayoutConfig.fallback_advance`` instead. There is no kerning.
"""

import time
import traceback
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from glyphpath.config import LayoutConfig, TessellationConfig
from glyphpath.core.builder import build_path
from glyphpath.domain import Glyph, Path
from glyphpath.utils.logging import ConversionLogger

if TYPE_CHECKING:
    from glyphpath.io.reader import FontReader


@dataclass
class PlacedGlyph:
    """A converted glyph at its position in the message.

    Attributes:
        char: Source character (or code point)
        glyph: Glyph read from the font
        offset_x: Horizontal pen position the glyph was drawn at
        offset_y: Vertical pen position the glyph was drawn at
        path: Path built for the glyph at that position
    """

    char: str | int
    glyph: Glyph
    offset_x: float
    offset_y: float
    path: Path


@dataclass
class TextLayout:
    """Result of laying out a message.

    Attributes:
        glyphs: Placed glyphs in message order
        advance: Pen position after the last glyph
    """

    glyphs: list[PlacedGlyph] = field(default_factory=list)
    advance: float = 0.0

    def __len__(self) -> int:
        return len(self.glyphs)

    def paths(self) -> list[Path]:
        return [placed.path for placed in self.glyphs]


def advance_for(glyph: Glyph, config: LayoutConfig) -> float:
    """Horizontal pen advance after drawing a glyph.

    Args:
        glyph: Glyph just drawn
        config: Layout settings

    Returns:
        Distance to move the pen right
    """
    if glyph.metadata.advance_width <= 0:
        return config.fallback_advance
    return glyph.metadata.advance_width * config.advance_factor


def layout_message(
    reader: "FontReader",
    message: Iterable[str | int],
    tessellation: TessellationConfig | None = None,
    layout: LayoutConfig | None = None,
    conversion_logger: ConversionLogger | None = None,
    strict: bool = False,
) -> TextLayout:
    """Convert every character of a message at its pen position.

    Args:
        reader: Loaded font reader
        message: Characters or integer code points
        tessellation: Curve output settings
        layout: Pen advance settings
        conversion_logger: Receives per-glyph progress and statistics;
            also used as the builder's debug sink
        strict: Fail on unmapped characters instead of drawing .notdef

    Returns:
        TextLayout with one PlacedGlyph per character

    Raises:
        GlyphPathError: If a glyph cannot be read (after logging it)
    """
    tessellation = tessellation or TessellationConfig()
    layout = layout or LayoutConfig()
    builder_logger = conversion_logger.logger if conversion_logger else None

    result = TextLayout()
    offset_x = 0.0
    offset_y = 0.0

    if conversion_logger:
        conversion_logger.stats.start_time = time.time()

    for char in message:
        start = time.time()
        if conversion_logger:
            conversion_logger.log_glyph_start(str(char), offset_x)

        try:
            glyph = reader.get_glyph(char, strict=strict)
        except Exception as e:
            if conversion_logger:
                conversion_logger.log_glyph_error(str(char), e, traceback.format_exc())
            raise

        path = build_path(
            glyph.outline,
            offset_x,
            offset_y,
            tessellation.emit_curves,
            step=tessellation.step,
            logger=builder_logger,
        )

        if conversion_logger:
            if path.is_empty():
                conversion_logger.log_glyph_empty(glyph.name, path.note or "empty")
            else:
                conversion_logger.log_glyph_complete(
                    glyph.name,
                    contours=glyph.outline.contour_count,
                    commands=len(path),
                    duration_ms=(time.time() - start) * 1000,
                )

        result.glyphs.append(
            PlacedGlyph(char=char, glyph=glyph, offset_x=offset_x, offset_y=offset_y, path=path)
        )
        offset_x += advance_for(glyph, layout)

    result.advance = offset_x
    if conversion_logger:
        conversion_logger.stats.end_time = time.time()
    return result
