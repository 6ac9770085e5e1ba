"""ANSI escape sequences for coloured terminal output."""

RESET = "\033[0m"
BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
BOLDBLACK = "\033[1m\033[30m"
BOLDRED = "\033[1m\033[31m"
BOLDGREEN = "\033[1m\033[32m"
BOLDYELLOW = "\033[1m\033[33m"
BOLDBLUE = "\033[1m\033[34m"
BOLDMAGENTA = "\033[1m\033[35m"
BOLDCYAN = "\033[1m\033[36m"
BOLDWHITE = "\033[1m\033[37m"

_BY_NAME = {
    "reset": RESET,
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "yellow": YELLOW,
    "blue": BLUE,
    "magenta": MAGENTA,
    "cyan": CYAN,
    "white": WHITE,
    "boldblack": BOLDBLACK,
    "boldred": BOLDRED,
    "boldgreen": BOLDGREEN,
    "boldyellow": BOLDYELLOW,
    "boldblue": BOLDBLUE,
    "boldmagenta": BOLDMAGENTA,
    "boldcyan": BOLDCYAN,
    "boldwhite": BOLDWHITE,
}


def colorize(text, color):
    """Wrap ``text`` in ``color`` and a trailing reset.

    ``color`` is either one of the escape sequences above or its name
    (case-insensitive, e.g. ``"red"`` or ``"BoldBlue"``).
    """
    if color.startswith("\033["):
        code = color
    else:
        try:
            code = _BY_NAME[color.lower()]
        except KeyError:
            raise ValueError(f"unknown color: {color!r}") from None
    return f"{code}{text}{RESET}"