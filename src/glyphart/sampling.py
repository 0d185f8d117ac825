import logging

import numpy as np

from glyphart.bitmap import CoverageBitmap, OutputGrid
from glyphart.errors import InvalidDimensions

logger = logging.getLogger(__name__)


def _axis_spans(source: int, target: int) -> tuple[np.ndarray, np.ndarray]:
    """Source index ranges [start, stop) for each of `target` output cells along one axis.

    Cell i covers [i*source/target, (i+1)*source/target); a source pixel j belongs to it
    when its centre j + 0.5 lies inside. Cells containing no centre fall back to the
    pixel under the range start. All arithmetic is exact integer math.
    """
    i = np.arange(target, dtype=np.int64)
    # ceil((2*i*source - target) / (2*target))
    start = -((target - 2 * i * source) // (2 * target))
    stop = -((target - 2 * (i + 1) * source) // (2 * target))
    start = np.clip(start, 0, source)
    stop = np.clip(stop, 0, source)

    empty = stop <= start
    nearest = np.minimum(i * source // target, source - 1)
    start = np.where(empty, nearest, start)
    stop = np.where(empty, nearest + 1, stop)
    return start, stop


def resample(bitmap: CoverageBitmap, target_width: int, target_height: int) -> OutputGrid:
    """Area-average a coverage bitmap onto a target_width x target_height grid.

    Each output cell is the mean of the source samples whose centres fall in its
    rectangle, rounded half up. Works for both down- and upsampling, the two axes
    are treated independently.
    """
    if target_width <= 0 or target_height <= 0:
        raise InvalidDimensions(target_width, target_height)

    x0, x1 = _axis_spans(bitmap.width, target_width)
    y0, y1 = _axis_spans(bitmap.height, target_height)

    # Summed-area table padded with a leading zero row and column
    table = np.zeros((bitmap.height + 1, bitmap.width + 1), dtype=np.int64)
    table[1:, 1:] = bitmap.samples.astype(np.int64).cumsum(axis=0).cumsum(axis=1)

    rows0, rows1 = y0[:, None], y1[:, None]
    cols0, cols1 = x0[None, :], x1[None, :]
    sums = table[rows1, cols1] - table[rows0, cols1] - table[rows1, cols0] + table[rows0, cols0]
    counts = (rows1 - rows0) * (cols1 - cols0)

    # Round half up: floor(sum / count + 1/2)
    means = (2 * sums + counts) // (2 * counts)
    cells = np.clip(means, 0, 255).astype(np.uint8)

    logger.debug(
        "Resampled %dx%d bitmap to %dx%d grid", bitmap.width, bitmap.height, target_width, target_height
    )
    return OutputGrid(width=target_width, height=target_height, cells=cells)
