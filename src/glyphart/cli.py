import argparse
import logging
import os
import sys

from glyphart.converter import render_file
from glyphart.errors import GlyphArtError
from glyphart.model import PRESETS, RenderMode
from glyphart.raster import find_font_for

FONT_ENV = "GLYPHART_FONT"


def setup_logging(debug: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger = logging.getLogger("glyphart")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render a single character as text art")
    parser.add_argument("character", help="Character to render (first code point is used)")
    parser.add_argument("width", nargs="?", type=int, default=30, help="Width in terminal columns (default: 30)")
    parser.add_argument("height", nargs="?", type=int, default=30, help="Height in terminal rows (default: 30)")
    parser.add_argument(
        "-f", "--font", default=None, help=f"Font file to use (default: ${FONT_ENV}, then fontconfig lookup)"
    )
    parser.add_argument(
        "-m", "--mode", default="default", choices=sorted(PRESETS), help="Render mode preset (default: default)"
    )
    parser.add_argument("--debug", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    if not args.character:
        parser.error("character must not be empty")
    character = args.character[0]

    font_path = args.font or os.environ.get(FONT_ENV) or find_font_for(character)
    if font_path is None:
        print(f"No font found for {character!r}; pass --font or set ${FONT_ENV}", file=sys.stderr)
        sys.exit(1)

    print(f"Rendering {character!r} at {args.width}x{args.height} using {font_path}")
    print()
    try:
        lines = render_file(font_path, character, args.width, args.height, RenderMode.from_name(args.mode))
    except GlyphArtError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    for line in lines:
        print(line)
