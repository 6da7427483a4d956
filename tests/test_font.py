import pytest

from gfc.font import Font
from gfc.graphics import Graphics

RED = (255, 0, 0, 255)


@pytest.fixture
def graphics():
    return Graphics(200, 100)


def test_defaults(graphics):
    font = Font(graphics)
    assert font.face == "arial.ttf"
    assert font.size == 18
    assert font.color == (0, 0, 0, 255)


def test_load_default_succeeds(graphics):
    assert Font(graphics).load_default() is True


def test_load_resets_size_and_color(graphics):
    font = Font(graphics)
    font.set_size(30)
    font.set_color(RED)
    assert font.load("other.ttf") is True
    assert font.face == "other.ttf"
    assert font.size == 18
    assert font.color == (0, 0, 0, 255)


def test_set_color_components_default_alpha(graphics):
    font = Font(graphics)
    font.set_color(1, 2, 3)
    assert font.color == (1, 2, 3, 100)
    font.set_color(1, 2, 3, 255)
    assert font.color == (1, 2, 3, 255)


def test_set_color_rejects_bad_channel(graphics):
    with pytest.raises(ValueError):
        Font(graphics).set_color(300, 0, 0)


def test_set_color_rejects_bad_arity(graphics):
    with pytest.raises(TypeError):
        Font(graphics).set_color(1, 2)


def test_empty_text_has_no_width(graphics):
    assert Font(graphics).draw_text(0, 0, "") == 0


def test_text_has_width(graphics):
    assert Font(graphics).draw_text(0, 0, "Hello") > 0


def test_draw_number_matches_text(graphics):
    font = Font(graphics)
    assert font.draw_number(0, 0, 42) == font.draw_text(0, 0, "42")
    assert font.draw_number(0, 0, -7) == font.draw_text(0, 0, "-7")


def test_draw_char_matches_text(graphics):
    font = Font(graphics)
    assert font.draw_char(0, 0, "A") == font.draw_text(0, 0, "A")


def test_draw_char_rejects_strings(graphics):
    with pytest.raises(ValueError):
        Font(graphics).draw_char(0, 0, "ab")


def test_larger_size_is_wider(graphics):
    font = Font(graphics)
    font.set_size(10)
    small = font.draw_text(0, 0, "Wide text")
    font.set_size(40)
    large = font.draw_text(0, 0, "Wide text")
    assert large > small


def test_override_leaves_settings(graphics):
    font = Font(graphics)
    font.draw_text(0, 0, "x", RED, 30)
    font.draw_number(0, 0, 5, RED, 30)
    assert font.size == 18
    assert font.color == (0, 0, 0, 255)


def test_text_drawn_in_colour(graphics):
    graphics.fill((255, 255, 255))
    font = Font(graphics)
    font.set_color(RED)
    font.set_size(48)
    font.draw_text(10, 10, "M")
    surface = graphics.surface
    pixels = {
        tuple(surface.get_at((x, y)))
        for x in range(surface.get_width())
        for y in range(surface.get_height())
    }
    assert RED in pixels