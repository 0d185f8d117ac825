import io
import logging
import struct
import subprocess
from typing import Protocol

import numpy as np
from fontTools.ttLib import TTFont, TTLibError
from PIL import Image, ImageDraw, ImageFont

from glyphart.bitmap import CoverageBitmap
from glyphart.errors import FontLoadError, GlyphNotFound

logger = logging.getLogger(__name__)


class Rasterizer(Protocol):
    def rasterize(self, font_bytes: bytes, character: str, pixel_size: float) -> CoverageBitmap:
        """Scan-convert one character to a coverage bitmap roughly pixel_size pixels tall."""
        ...


def find_font_for(char: str) -> str | None:
    """Ask fontconfig which font provides a given character."""
    codepoint = f"{ord(char):04x}"
    try:
        result = subprocess.run(
            ["fc-match", "-f", "%{file}", f":charset={codepoint}"],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        return None
    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip()
    return None


def _has_glyph(font_bytes: bytes, char: str) -> bool:
    """Check the font's Unicode cmap for a mapping of char."""
    try:
        font = TTFont(io.BytesIO(font_bytes), fontNumber=0, lazy=True)
        cmap = font.getBestCmap()
    except (TTLibError, KeyError, AssertionError, struct.error) as exc:
        raise FontLoadError(f"Failed to parse font: {exc}") from exc
    if cmap is None:
        raise FontLoadError("Font has no Unicode character map")
    return ord(char) in cmap


class PillowRasterizer:
    """Rasterizer backed by Pillow's FreeType binding, with glyph coverage read via fontTools."""

    def rasterize(self, font_bytes: bytes, character: str, pixel_size: float) -> CoverageBitmap:
        if not _has_glyph(font_bytes, character):
            raise GlyphNotFound(character)

        size = max(1, round(pixel_size))
        try:
            font = ImageFont.truetype(io.BytesIO(font_bytes), size)
        except OSError as exc:
            raise FontLoadError(f"Failed to load font: {exc}") from exc

        bbox = font.getbbox(character)
        width = bbox[2] - bbox[0]
        height = bbox[3] - bbox[1]
        if width <= 0 or height <= 0:
            logger.debug("Glyph %r has no extent at %dpx", character, size)
            return CoverageBitmap.blank()

        img = Image.new("L", (width, height), 0)
        draw = ImageDraw.Draw(img)
        draw.text((-bbox[0], -bbox[1]), character, fill=255, font=font)

        # Crop to the inked area; the bbox includes side bearings for some fonts
        ink = img.getbbox()
        if ink is None:
            logger.debug("Glyph %r has no ink at %dpx", character, size)
            return CoverageBitmap.blank()
        img = img.crop(ink)

        logger.debug("Rasterized %r at %dpx to %dx%d", character, size, img.width, img.height)
        return CoverageBitmap.from_array(np.asarray(img, dtype=np.uint8))
