import pytest

from asciigraph import Colour, Layer, fmt_in_colour


@pytest.mark.parametrize("colour,layer,code", [
    (Colour.BLACK, Layer.FOREGROUND, "\x1b[30m"),
    (Colour.RED, Layer.FOREGROUND, "\x1b[31m"),
    (Colour.ORANGE, Layer.FOREGROUND, "\x1b[33m"),
    (Colour.LIGHT_GREY, Layer.FOREGROUND, "\x1b[37m"),
    (Colour.FALLBACK_DEFAULT, Layer.FOREGROUND, "\x1b[39m"),
    (Colour.GREEN, Layer.BACKGROUND, "\x1b[42m"),
    (Colour.CYAN, Layer.BACKGROUND, "\x1b[46m"),
    (Colour.FALLBACK_DEFAULT, Layer.BACKGROUND, "\x1b[49m"),
])
def test_to_code(colour, layer, code):
    assert colour.to_code(layer) == code


def test_fmt_in_colour_resets_the_same_layer():
    assert fmt_in_colour("#", Colour.BLUE, Layer.FOREGROUND) == "\x1b[34m#\x1b[39m"
    assert fmt_in_colour("#", Colour.MAGENTA, Layer.BACKGROUND) == "\x1b[45m#\x1b[49m"


@pytest.mark.parametrize("name,expected", [
    ("red", Colour.RED),
    ("RED", Colour.RED),
    ("Light Grey", Colour.LIGHT_GREY),
    ("light-grey", Colour.LIGHT_GREY),
    (Colour.CYAN, Colour.CYAN),
])
def test_parse(name, expected):
    assert Colour.parse(name) is expected


def test_parse_unknown():
    with pytest.raises(ValueError, match="Unknown colour"):
        Colour.parse("purple")
