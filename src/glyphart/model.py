from dataclasses import dataclass
from enum import Enum


class CharacterSet(Enum):
    DENSITY = "density"
    BLOCKS = "blocks"


class ColorMode(Enum):
    NONE = "none"
    ANSI256 = "ansi256"
    TRUECOLOR = "truecolor"


@dataclass(frozen=True)
class RenderMode:
    charset: CharacterSet = CharacterSet.DENSITY
    color_mode: ColorMode = ColorMode.NONE

    @property
    def coloured(self) -> bool:
        return self.color_mode is not ColorMode.NONE

    @classmethod
    def from_name(cls, name: str) -> "RenderMode":
        key = name.strip().lower().replace("-", "_")
        try:
            return PRESETS[key]
        except KeyError:
            raise ValueError(f"Unknown render mode {name!r} (choose from {', '.join(sorted(PRESETS))})") from None


DEFAULT = RenderMode()
BLOCKS = RenderMode(CharacterSet.BLOCKS, ColorMode.NONE)
DENSITY_256 = RenderMode(CharacterSet.DENSITY, ColorMode.ANSI256)
DENSITY_TRUECOLOR = RenderMode(CharacterSet.DENSITY, ColorMode.TRUECOLOR)
BLOCKS_256 = RenderMode(CharacterSet.BLOCKS, ColorMode.ANSI256)
BLOCKS_TRUECOLOR = RenderMode(CharacterSet.BLOCKS, ColorMode.TRUECOLOR)

PRESETS = {
    "default": DEFAULT,
    "density": DEFAULT,
    "blocks": BLOCKS,
    "density_256": DENSITY_256,
    "density_truecolor": DENSITY_TRUECOLOR,
    "blocks_256": BLOCKS_256,
    "blocks_truecolor": BLOCKS_TRUECOLOR,
}
