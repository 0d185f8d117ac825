import logging
from pathlib import Path

from glyphart.bitmap import OutputGrid
from glyphart.errors import FontLoadError, InvalidDimensions
from glyphart.model import DEFAULT, RenderMode
from glyphart.quantize import RESET, quantize_character, quantize_color
from glyphart.raster import PillowRasterizer, Rasterizer
from glyphart.sampling import resample

logger = logging.getLogger(__name__)

# Terminal cells are roughly twice as tall as they are wide
CELL_ASPECT = 2.0


def assemble(grid: OutputGrid, mode: RenderMode) -> list[str]:
    """Quantize every cell and join each row into a printable line.

    With colour enabled each character is preceded by its escape sequence and
    the line ends with a single reset.
    """
    lines = []
    for row in grid.rows():
        parts = []
        for intensity in row:
            char = quantize_character(intensity, mode.charset)
            directive = quantize_color(intensity, mode.color_mode)
            parts.append(char if directive is None else directive.escape + char)
        if mode.coloured:
            parts.append(RESET)
        lines.append("".join(parts))
    return lines


def pixel_size_for(width: int, height: int) -> float:
    """Raster size that gives at least one pixel per cell on both axes."""
    return max(float(width), height * CELL_ASPECT)


def render_char_with_mode(
    font_bytes: bytes,
    character: str,
    width: int,
    height: int,
    mode: RenderMode,
    rasterizer: Rasterizer | None = None,
) -> list[str]:
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)
    if len(character) != 1:
        raise ValueError(f"Expected a single character, got {character!r}")

    if rasterizer is None:
        rasterizer = PillowRasterizer()
    bitmap = rasterizer.rasterize(font_bytes, character, pixel_size_for(width, height))
    grid = resample(bitmap, width, height)
    logger.debug("Rendering %r at %dx%d with %s", character, width, height, mode)
    return assemble(grid, mode)


def render_char(
    font_bytes: bytes,
    character: str,
    width: int,
    height: int,
    rasterizer: Rasterizer | None = None,
) -> list[str]:
    return render_char_with_mode(font_bytes, character, width, height, DEFAULT, rasterizer)


def render_file(
    font_path: str | Path,
    character: str,
    width: int,
    height: int,
    mode: RenderMode = DEFAULT,
) -> list[str]:
    """Render a character using a font file on disk."""
    try:
        font_bytes = Path(font_path).read_bytes()
    except OSError as exc:
        raise FontLoadError(f"Failed to read font: {exc}") from exc
    return render_char_with_mode(font_bytes, character, width, height, mode)
