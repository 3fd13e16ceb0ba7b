"""Console colours used to highlight task output."""

from enum import IntEnum


class Color(IntEnum):
    """Console colour attributes used by the tracker."""

    DEFAULT = 7
    GRAY = 8
    BLUE = 9
    GREEN = 10
    CYAN = 11
    RED = 12
    PURPLE = 13
    YELLOW = 14
    WHITE = 15

    @property
    def ansi(self) -> str:
        """The ANSI escape sequence that selects this colour."""
        return _ANSI[self]


RESET = "\033[0m"

_ANSI = {
    Color.DEFAULT: RESET,
    Color.GRAY: "\033[90m",
    Color.BLUE: "\033[94m",
    Color.GREEN: "\033[92m",
    Color.CYAN: "\033[96m",
    Color.RED: "\033[91m",
    Color.PURPLE: "\033[95m",
    Color.YELLOW: "\033[93m",
    Color.WHITE: "\033[97m",
}

_STATUS_COLORS = {
    "todo": Color.YELLOW,
    "in-progress": Color.BLUE,
    "done": Color.GREEN,
}

_PRIORITY_COLORS = {
    1: Color.GREEN,
    2: Color.CYAN,
    3: Color.YELLOW,
    4: Color.RED,
    5: Color.PURPLE,
}


def colorize(text, color):
    """Wrap text in the escape sequence for color, followed by a reset."""
    return f"{Color(color).ansi}{text}{RESET}"


def status_color(status):
    """The colour that represents a task status; white for unknown ones."""
    key = getattr(status, "value", status)
    return _STATUS_COLORS.get(key, Color.WHITE)


def priority_color(priority):
    """The colour for a priority from 1 (low) to 5 (urgent); white otherwise."""
    return _PRIORITY_COLORS.get(priority, Color.WHITE)


def _paint(text, color, enabled):
    return colorize(text, color) if enabled else text