import pytest

from spherelib import Color, ColorException, STD_COLORS


def test_color_is_a_plain_tuple():
    c = Color(255, 0, 10)
    assert c == (255, 0, 10)
    assert (c.r, c.g, c.b) == (255, 0, 10)


def test_color_is_immutable():
    c = Color(1, 2, 3)
    with pytest.raises(AttributeError):
        c.r = 5


@pytest.mark.parametrize('channels', [(256, 0, 0), (-1, 0, 0), (0, 0.5, 0)])
def test_out_of_range_channels(channels):
    with pytest.raises(ColorException):
        Color(*channels)


def test_palette_entries_are_colors():
    assert STD_COLORS['red'] == Color(255, 0, 0)
    assert all(isinstance(c, Color) for c in STD_COLORS.values())
