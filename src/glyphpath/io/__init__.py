"""Font and document I/O for glyphpath.

This module handles reading TrueType fonts using fonttools and writing
SVG documents using svgwrite. It keeps both libraries out of the
conversion core.

Key classes:
- FontReader: Load fonts and extract glyph outlines
- SvgDocument: Wrap glyph paths in an SVG document
"""

from glyphpath.io.document import SvgDocument
from glyphpath.io.reader import FontReader, parse_code_point

__all__ = [
    "FontReader",
    "SvgDocument",
    "parse_code_point",
]
