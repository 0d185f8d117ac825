class GlyphArtError(ValueError):
    """Base class for errors raised while rendering a glyph."""


class InvalidDimensions(GlyphArtError):
    def __init__(self, width: int, height: int):
        super().__init__(f"Invalid dimensions {width}x{height}: width and height must be positive")
        self.width = width
        self.height = height


class GlyphNotFound(GlyphArtError):
    def __init__(self, character: str):
        super().__init__(f"Font has no glyph for {character!r} (U+{ord(character):04X})")
        self.character = character


class FontLoadError(GlyphArtError):
    """Font data could not be read or parsed."""
