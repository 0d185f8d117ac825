from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _as_samples(samples, width: int, height: int, label: str) -> np.ndarray:
    """Validate and freeze a row-major block of intensities as a (height, width) uint8 array."""
    if width <= 0 or height <= 0:
        raise ValueError(f"{label} dimensions must be positive, got {width}x{height}")
    arr = np.asarray(samples)
    if arr.size != width * height:
        raise ValueError(f"{label} needs {width * height} samples for {width}x{height}, got {arr.size}")
    if arr.min() < 0 or arr.max() > 255:
        raise ValueError(f"{label} samples must be within 0-255")
    arr = np.array(arr, dtype=np.uint8).reshape(height, width)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class CoverageBitmap:
    """Grayscale glyph coverage as produced by a rasterizer. 0 is background, 255 fully covered."""

    width: int
    height: int
    samples: np.ndarray  # (height, width) uint8, read-only

    def __post_init__(self):
        object.__setattr__(self, "samples", _as_samples(self.samples, self.width, self.height, "Bitmap"))

    @classmethod
    def from_array(cls, arr) -> CoverageBitmap:
        arr = np.asarray(arr)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {arr.shape}")
        height, width = arr.shape
        return cls(width=width, height=height, samples=arr)

    @classmethod
    def blank(cls) -> CoverageBitmap:
        return cls(width=1, height=1, samples=[0])


@dataclass(frozen=True)
class OutputGrid:
    width: int
    height: int
    cells: np.ndarray  # (height, width) uint8, read-only

    def __post_init__(self):
        object.__setattr__(self, "cells", _as_samples(self.cells, self.width, self.height, "Grid"))

    def rows(self):
        for row in self.cells:
            yield [int(v) for v in row]
