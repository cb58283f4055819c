"""Unit tests for the font reader."""

from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

from glyphpath.core import build_path
from glyphpath.domain import ClosePath, LineTo, MoveTo, QuadCurveTo
from glyphpath.exceptions import FontFormatError, GlyphNotFoundError, GlyphProcessingError
from glyphpath.io.reader import FontReader, parse_code_point


class TestParseCodePoint:
    """Tests for strtol-style code point literals."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("65", 65),
            ("0x41", 65),
            ("0X6f", 111),
            ("0101", 65),
            ("0", 0),
            (" 97 ", 97),
            ("A", 65),
            ("é", 233),
        ],
    )
    def test_literals(self, text: str, expected: int) -> None:
        """Test decimal, hex, octal and single-character literals."""
        assert parse_code_point(text) == expected

    @pytest.mark.parametrize("text", ["abc", "08", "12ab", "0x"])
    def test_invalid(self, text: str) -> None:
        """Test non-numbers and partial numbers are rejected."""
        with pytest.raises(ValueError, match="Invalid code point"):
            parse_code_point(text)


class TestFontReaderState:
    """Tests for FontReader lifecycle without a real font."""

    def test_init(self):
        """Test FontReader initialization."""
        path = Path("test.ttf")
        reader = FontReader(path)
        assert reader._font_path == path
        assert reader._font is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = FontReader(Path("nonexistent.ttf"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    @pytest.mark.parametrize("attr", ["units_per_em", "glyph_count", "bounding_box"])
    def test_property_before_load(self, attr: str):
        """Test accessing font data before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            getattr(reader, attr)

    def test_get_glyph_before_load(self):
        """Test reading a glyph before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.get_glyph("A")

    @patch("glyphpath.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_cff_font_rejected(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test fonts without a glyf table are rejected."""
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "CFF ")
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.otf"))
        with pytest.raises(FontFormatError, match="glyf"):
            reader.load()
        mock_font.close.assert_called_once()
        assert reader._font is None

    @patch("glyphpath.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_context_manager(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test FontReader as context manager."""
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "glyf")
        mock_ttfont.return_value = mock_font

        with FontReader(Path("test.ttf")) as reader:
            assert reader._font is not None

        mock_font.close.assert_called_once()


class TestFontReaderGlyphs:
    """Tests against the generated test font."""

    def test_font_properties(self, test_font_path: Path) -> None:
        """Test basic font data."""
        with FontReader(test_font_path) as reader:
            assert reader.units_per_em == 1000
            assert reader.glyph_count == 5
            x_min, y_min, x_max, y_max = reader.bounding_box
            assert x_max == 500
            assert y_max == 700

    def test_line_glyph_flipped(self, test_font_path: Path) -> None:
        """Test y is negated and contours are split by end indices."""
        with FontReader(test_font_path) as reader:
            glyph = reader.get_glyph("A")

        outline = glyph.outline
        assert glyph.name == "A"
        assert glyph.metadata.unicode == 65
        assert glyph.metadata.advance_width == 500
        assert outline.contour_ends == (2, 5)
        assert [p.to_tuple() for p in outline.contour_points(0)] == [
            (0, 0),
            (250, -700),
            (500, 0),
        ]
        assert all(p.on_curve for p in outline.points)

    def test_line_glyph_path(self, test_font_path: Path) -> None:
        """Test the triangle converts to two closed polygons."""
        with FontReader(test_font_path) as reader:
            path = build_path(reader.get_glyph("A").outline)

        assert path.subpaths()[0] == [
            MoveTo(0, 0),
            LineTo(250, -700),
            LineTo(500, 0),
            LineTo(0, 0),
            ClosePath(),
        ]
        assert len(path.subpaths()) == 2

    def test_curve_glyph_path(self, test_font_path: Path) -> None:
        """Test implied on-curve points are synthesized from the font data."""
        with FontReader(test_font_path) as reader:
            glyph = reader.get_glyph("o")

        flags = [p.on_curve for p in glyph.outline.points]
        assert flags == [True, False, False, True, False, False]

        path = build_path(glyph.outline)
        assert path.commands == [
            MoveTo(250, 0),
            QuadCurveTo(500, 0, 500, -350),
            QuadCurveTo(500, -700, 250, -700),
            QuadCurveTo(0, -700, 0, -350),
            QuadCurveTo(0, 0, 250, 0),
            ClosePath(),
        ]

    def test_code_point_lookup(self, test_font_path: Path) -> None:
        """Test integer code points resolve like characters."""
        with FontReader(test_font_path) as reader:
            assert reader.get_glyph(0x6F).name == "o"

    def test_space_is_empty(self, test_font_path: Path) -> None:
        """Test a glyph without contours reads as an empty outline."""
        with FontReader(test_font_path) as reader:
            glyph = reader.get_glyph(" ")

        assert glyph.is_empty()
        assert build_path(glyph.outline).is_empty()

    def test_unmapped_falls_back_to_notdef(self, test_font_path: Path) -> None:
        """Test characters missing from cmap draw the first glyph."""
        with FontReader(test_font_path) as reader:
            glyph = reader.get_glyph("Z")

        assert glyph.name == ".notdef"
        assert glyph.metadata.unicode == ord("Z")

    def test_unmapped_strict(self, test_font_path: Path) -> None:
        """Test strict lookup raises for missing characters."""
        with FontReader(test_font_path) as reader:
            with pytest.raises(GlyphNotFoundError):
                reader.get_glyph("Z", strict=True)

    def test_composite_rejected(self, test_font_path: Path) -> None:
        """Test composite glyphs are reported, not converted."""
        with FontReader(test_font_path) as reader:
            with pytest.raises(GlyphProcessingError, match="composite"):
                reader.get_glyph("Á")

    @pytest.mark.parametrize(
        ("code_point", "label"), [(0x110000, "U+110000"), (0x10FFFF, "U+10FFFF")]
    )
    def test_unmapped_code_point_strict(
        self, test_font_path: Path, code_point: int, label: str
    ) -> None:
        """Test strict lookup of unmapped code points, including ones beyond Unicode."""
        with FontReader(test_font_path) as reader:
            with pytest.raises(GlyphNotFoundError) as exc_info:
                reader.get_glyph(code_point, strict=True)

        assert exc_info.value.char == label

    def test_out_of_range_code_point_falls_back(self, test_font_path: Path) -> None:
        """Test code points beyond Unicode draw .notdef without strict."""
        with FontReader(test_font_path) as reader:
            glyph = reader.get_glyph(0x110000)

        assert glyph.name == ".notdef"
        assert glyph.metadata.unicode == 0x110000
