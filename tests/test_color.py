import pytest

from tasktracker.color import RESET, Color, colorize, priority_color, status_color


def test_colorize_wraps_text_with_escape_and_reset():
    result = colorize("hello", Color.RED)
    assert result.startswith(Color.RED.ansi)
    assert result.endswith(RESET)
    assert "hello" in result


def test_colorize_accepts_plain_attribute_number():
    assert colorize("x", 10) == colorize("x", Color.GREEN)


def test_colorize_rejects_unknown_attribute():
    with pytest.raises(ValueError):
        colorize("x", 99)


def test_colour_values_match_console_attributes():
    assert status_color("done") == 10
    assert priority_color(4) == 12
    assert status_color("other") == 15
    assert colorize("x", 8) == colorize("x", Color.GRAY)


@pytest.mark.parametrize(
    "status, expected",
    [
        ("todo", Color.YELLOW),
        ("in-progress", Color.BLUE),
        ("done", Color.GREEN),
        ("other", Color.WHITE),
    ],
)
def test_status_color(status, expected):
    assert status_color(status) == expected


@pytest.mark.parametrize(
    "priority, expected",
    [
        (1, Color.GREEN),
        (2, Color.CYAN),
        (3, Color.YELLOW),
        (4, Color.RED),
        (5, Color.PURPLE),
        (0, Color.WHITE),
        (6, Color.WHITE),
    ],
)
def test_priority_color(priority, expected):
    assert priority_color(priority) == expected


def test_every_colour_has_distinct_escape():
    colours = [c for c in Color if c is not Color.DEFAULT]
    rendered = [colorize("x", c) for c in colours]
    assert len(set(rendered)) == len(colours)