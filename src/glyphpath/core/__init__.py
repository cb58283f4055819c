"""Core conversion algorithms for glyphpath.

This module contains the core algorithms for:

- Outline to path conversion (point classification, midpoint synthesis)
- Quadratic curve sampling for line-only output
- Message layout (pen advance between glyphs)

The conversion functions are:
- Stateless (no shared state between calls)
- Pure (no I/O; logging goes to an injected logger)

Key functions:
- build_path: Convert an Outline to a Path
- outline_to_svg: Convert an Outline to SVG path data
- sample_quadratic: Sample points along a quadratic Bezier curve
- layout_message: Convert and place every glyph of a string
"""

from glyphpath.core.builder import build_path, midpoint, outline_to_svg
from glyphpath.core.layout import PlacedGlyph, TextLayout, advance_for, layout_message
from glyphpath.core.tessellator import quadratic_point, sample_quadratic

__all__ = [
    # Layout
    "PlacedGlyph",
    "TextLayout",
    "advance_for",
    "layout_message",
    # Builder
    "build_path",
    "midpoint",
    "outline_to_svg",
    # Tessellator
    "quadratic_point",
    "sample_quadratic",
]
