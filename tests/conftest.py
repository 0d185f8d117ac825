import shutil
import subprocess
from pathlib import Path

import numpy as np
import pytest

from glyphart.bitmap import CoverageBitmap

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_monospace_font():
    """Find a monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if Path(path).exists():
            return path
    if shutil.which("fc-match"):
        out = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if out.returncode == 0 and out.stdout.strip().endswith((".ttf", ".otf")):
            return out.stdout.strip()
    return None


FONT_PATH = _find_monospace_font()


class FakeRasterizer:
    """Returns a fixed bitmap regardless of font and character."""

    def __init__(self, bitmap: CoverageBitmap):
        self.bitmap = bitmap
        self.calls = []

    def rasterize(self, font_bytes, character, pixel_size):
        self.calls.append((font_bytes, character, pixel_size))
        return self.bitmap


@pytest.fixture
def font_path():
    if FONT_PATH is None:
        pytest.skip("No monospace font found on system")
    return FONT_PATH


@pytest.fixture
def font_bytes(font_path):
    return Path(font_path).read_bytes()


@pytest.fixture
def fake_rasterizer():
    def make(samples):
        return FakeRasterizer(CoverageBitmap.from_array(np.asarray(samples, dtype=np.uint8)))

    return make
