"""Exception hierarchy for glyphpath."""


class GlyphPathError(Exception):
    """Base exception for all glyphpath errors."""

    pass


class FontError(GlyphPathError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontFormatError(FontError):
    """Unsupported or invalid font format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class GlyphError(GlyphPathError):
    """Errors related to glyph lookup or conversion."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested character has no usable glyph in the font."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"No glyph for character {char!r}")


class GlyphProcessingError(GlyphError):
    """Error converting a specific glyph."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Error processing glyph '{glyph_name}': {reason}")


class OutlineError(GlyphPathError):
    """Contour end indices are inconsistent with the outline's points."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
