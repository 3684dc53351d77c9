"""
ANSI Colour Codes

Lookup of terminal colour escape codes used to decorate plot symbols.
"""

from enum import Enum
from typing import Any

ESCAPE = "\x1b["


class Layer(str, Enum):
    """Which part of a character cell a colour applies to."""
    BACKGROUND = "background"
    FOREGROUND = "foreground"


class Colour(str, Enum):
    """Colours supported by basic 8-colour terminals."""
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    ORANGE = "orange"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    LIGHT_GREY = "light_grey"
    FALLBACK_DEFAULT = "fallback_default"

    @classmethod
    def parse(cls, value: Any) -> "Colour":
        """Parse a colour from an instance or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower().replace(" ", "_").replace("-", "_")
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown colour: {value!r}") from None

    def to_code(self, layer: Layer = Layer.FOREGROUND) -> str:
        offset = _LAYER_BASE[layer]
        return f"{ESCAPE}{offset + _COLOUR_INDEX[self]}m"


# SGR offsets: 30-37 foreground, 40-47 background, 9 selects the default
_LAYER_BASE = {
    Layer.FOREGROUND: 30,
    Layer.BACKGROUND: 40,
}

_COLOUR_INDEX = {
    Colour.BLACK: 0,
    Colour.RED: 1,
    Colour.GREEN: 2,
    Colour.ORANGE: 3,
    Colour.BLUE: 4,
    Colour.MAGENTA: 5,
    Colour.CYAN: 6,
    Colour.LIGHT_GREY: 7,
    Colour.FALLBACK_DEFAULT: 9,
}


def fmt_in_colour(text: Any, colour: Colour, layer: Layer = Layer.FOREGROUND) -> str:
    """Wrap text in the colour's escape code followed by the layer's reset code."""
    return f"{colour.to_code(layer)}{text}{Colour.FALLBACK_DEFAULT.to_code(layer)}"
