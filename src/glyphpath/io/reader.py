"""Font reader for loading TrueType fonts.

This module provides the FontReader class for loading font files and
extracting glyph outlines into domain models.
"""

import re
from pathlib import Path

from fontTools.ttLib import TTFont

from glyphpath.domain.glyph import Glyph, GlyphMetadata
from glyphpath.domain.outline import Outline
from glyphpath.exceptions import (
    FontFormatError,
    GlyphNotFoundError,
    GlyphProcessingError,
    OutlineError,
)

# glyf flag marking a cubic off-curve point (fontTools >= 4.40)
FLAG_CUBIC = 0x80

_OCTAL_RE = re.compile(r"^[+-]?0[0-7]+$")


def parse_code_point(text: str) -> int:
    """Parse a code point literal using the base prefixes of ``strtol(s, NULL, 0)``.

    Accepts decimal ("65"), hexadecimal ("0x41") and leading-zero octal
    ("0101"). Any other single character is taken literally. Unlike
    ``strtol``, the whole literal must be a valid number: "08" and "12ab"
    are rejected instead of being parsed up to the first bad digit.

    Args:
        text: Code point literal

    Returns:
        Integer code point

    Raises:
        ValueError: If text is neither a number nor a single character
    """
    literal = text.strip()
    if _OCTAL_RE.match(literal):
        return int(literal, 8)
    try:
        return int(literal, 0)
    except ValueError:
        if len(text) == 1:
            return ord(text)
        raise ValueError(f"Invalid code point: {text!r}") from None


def _coerce(value: float) -> int | float:
    return int(value) if float(value).is_integer() else value


class FontReader:
    """Loads TrueType fonts and extracts glyph outlines.

    Outlines are returned with the vertical axis flipped, so that y grows
    downward as in SVG.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            glyph = reader.get_glyph("A")
            print(glyph.outline.contour_count)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontFormatError: If the font has no quadratic (glyf) outlines
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        font = TTFont(str(self._font_path))
        if "glyf" not in font:
            font.close()
            raise FontFormatError(
                str(self._font_path), "no glyf table (only TrueType outlines are supported)"
            )
        self._font = font

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    @property
    def bounding_box(self) -> tuple[int, int, int, int]:
        """Return the font-wide bounding box as (x_min, y_min, x_max, y_max).

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        head = self._require_font()["head"]
        return (head.xMin, head.yMin, head.xMax, head.yMax)  # type: ignore[attr-defined]

    def glyph_name_for(self, char: str | int, strict: bool = False) -> str:
        """Resolve a character to a glyph name.

        Unmapped characters resolve to the first glyph (normally .notdef),
        which is what renderers draw for them.

        Args:
            char: Character or integer code point
            strict: Raise instead of falling back to the first glyph

        Returns:
            Glyph name

        Raises:
            GlyphNotFoundError: If strict and the character is not mapped
        """
        font = self._require_font()
        code_point = char if isinstance(char, int) else ord(char)
        cmap = font.getBestCmap() or {}

        name = cmap.get(code_point)
        if name is not None:
            return name
        if strict:
            raise GlyphNotFoundError(char if isinstance(char, str) else f"U+{code_point:04X}")
        return font.getGlyphOrder()[0]

    def get_glyph(self, char: str | int, strict: bool = False) -> Glyph:
        """Get the outline and metadata of the glyph for a character.

        Args:
            char: Character or integer code point
            strict: Raise for unmapped characters instead of using .notdef

        Returns:
            Glyph domain model with a validated outline

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If strict and the character is not mapped
            GlyphProcessingError: If the glyph is composite, cubic, or its
                contour data is inconsistent
        """
        font = self._require_font()
        name = self.glyph_name_for(char, strict=strict)
        code_point = char if isinstance(char, int) else ord(char)

        glyf_table = font["glyf"]
        tt_glyph = glyf_table[name]

        if tt_glyph.isComposite():
            raise GlyphProcessingError(name, "composite glyphs are not supported")

        coordinates, end_pts, flags = tt_glyph.getCoordinates(glyf_table)

        if any(flag & FLAG_CUBIC for flag in flags):
            raise GlyphProcessingError(name, "cubic outlines are not supported")

        # Invert y coordinates (SVG y grows downward, TrueType y grows upward)
        flipped = [(_coerce(x), _coerce(-y)) for x, y in coordinates]
        outline = Outline.from_arrays(flipped, flags, end_pts)

        try:
            outline.validate()
        except OutlineError as e:
            raise GlyphProcessingError(name, str(e)) from e

        advance_width, lsb = font["hmtx"][name]
        metadata = GlyphMetadata(
            name=name,
            unicode=code_point,
            advance_width=advance_width,
            left_side_bearing=lsb,
        )
        return Glyph(metadata=metadata, outline=outline)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
