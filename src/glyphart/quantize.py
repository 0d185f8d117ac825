from dataclasses import dataclass

from glyphart.charsets import BLOCK_THRESHOLD, BLOCKS, DENSITY
from glyphart.model import CharacterSet, ColorMode

RESET = "\033[0m"

# xterm reserves 232-255 for a 24-step grayscale ramp
GRAYSCALE_BASE = 232
GRAYSCALE_STEPS = 23


@dataclass(frozen=True)
class ColorDirective:
    """Foreground colour for one cell, emitted as an SGR escape."""

    escape: str

    def wrap(self, char: str) -> str:
        return f"{self.escape}{char}{RESET}"


def _check(intensity: int) -> int:
    intensity = int(intensity)
    if not 0 <= intensity <= 255:
        raise ValueError(f"Intensity out of range 0-255: {intensity}")
    return intensity


def ansi256_index(intensity: int) -> int:
    return GRAYSCALE_BASE + _check(intensity) * GRAYSCALE_STEPS // 255


def quantize_character(intensity: int, charset: CharacterSet) -> str:
    intensity = _check(intensity)
    if charset is CharacterSet.DENSITY:
        return DENSITY[intensity * (len(DENSITY) - 1) // 255]
    if charset is CharacterSet.BLOCKS:
        return BLOCKS[0] if intensity < BLOCK_THRESHOLD else BLOCKS[1]
    raise ValueError(f"Unknown character set: {charset!r}")


def quantize_color(intensity: int, mode: ColorMode) -> ColorDirective | None:
    intensity = _check(intensity)
    if mode is ColorMode.NONE:
        return None
    if mode is ColorMode.ANSI256:
        return ColorDirective(f"\033[38;5;{ansi256_index(intensity)}m")
    if mode is ColorMode.TRUECOLOR:
        return ColorDirective(f"\033[38;2;{intensity};{intensity};{intensity}m")
    raise ValueError(f"Unknown colour mode: {mode!r}")
