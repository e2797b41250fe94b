"""
ANSI escape sequences used when logging with colorized lines.
"""

from enum import Enum


class TerminalColor(Enum):
    """
    The set of colors used when logging with colorized lines.
    """

    WHITE = "\x1b[0;37m"
    RED = "\x1b[0;31m"
    YELLOW = "\x1b[0;33m"
    GREY = "\x1b[0;30;1m"
    FOREGROUND = "\x1b[0;39m"  # default foreground color
    BACKGROUND = "\x1b[0;49m"  # default background color


def colorize(line: str, color: TerminalColor, colored: bool = True) -> str:
    """
    Wrap ``line`` in ``color`` and a trailing foreground reset.

    Parameters
    ----------
    line : str
        Fully assembled log line.
    color : TerminalColor
        Color chosen for the event's severity.
    colored : bool, optional
        When False the line is returned untouched, by default True.

    Returns
    -------
    str
        Colorized (or original) line.
    """
    if not colored:
        return line
    return color.value + line + TerminalColor.FOREGROUND.value
