"""String helpers for command line handling: option syntax, tokenising and text layout."""

import re

_WHITESPACE = " \a\b\f\n\r\t\v"
_DIGITS = "0123456789"


def is_digit(char):
    """Return whether ``char`` is one of the ASCII digits ``0``-``9``."""
    return len(char) == 1 and char in _DIGITS


def is_valid_option_string(text):
    """Return whether ``text`` has the syntax of an option.

    It must be at least two characters long, start with ``-``, not be just
    ``--`` and not look like a negative number.
    """
    if len(text) < 2:
        return False
    if not text.startswith("-"):
        return False
    if text == "--":
        return False
    if is_digit(text[1]):
        return False
    return True


def is_valid_long_option_string(text):
    """Return whether ``text`` has the syntax of a long option (``--xx`` at least)."""
    return len(text) >= 4 and text.startswith("--")


def split_string(text, delimiters=" \t\n"):
    """Split ``text`` at any of the ``delimiters`` characters, dropping empty tokens."""
    if not delimiters:
        return [text] if text else []
    pattern = "[" + re.escape(delimiters) + "]"
    return [token for token in re.split(pattern, text) if token]


def split_option_and_value(text):
    """Split an ``option=value`` string.

    Returns ``(option, value)``. When ``text`` holds no assignment the option
    is the whole string and the value is ``None``. Further ``=`` signs are
    dropped and the remaining pieces are joined into the value.
    """
    tokens = split_string(text, "=")
    if len(tokens) < 2:
        return text, None
    return tokens[0], "".join(tokens[1:])


def trimmed_string(text):
    """Return ``text`` without whitespace at either end."""
    return text.strip(_WHITESPACE)


def _atoi(text):
    """Parse the leading decimal integer of ``text``; 0 when there is none."""
    match = re.match(r"[ \t\n\v\f\r]*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def expand_range_string(text):
    """Expand a string such as ``'1,3-5,25-20'`` into a list of integers.

    Ranges run upwards or downwards depending on their bounds. Raises
    ``ValueError`` on a malformed range.
    """
    expanded = []
    for entry in split_string(text, ","):
        if "-" in entry:
            borders = split_string(entry, "-")
            if len(borders) != 2:
                raise ValueError(f"malformed range: {entry!r}")
            first, second = _atoi(borders[0]), _atoi(borders[1])
            step = 1 if first <= second else -1
            expanded.extend(range(first, second + step, step))
        else:
            expanded.append(_atoi(entry))
    return expanded


def format_string(text, width, indent=0):
    """Wrap ``text`` to lines of at most ``width`` columns, indented by ``indent``.

    If ``indent`` is not smaller than ``width`` the text is returned unchanged.
    """
    if indent >= width:
        return text
    span = width - indent
    lines = []
    pos = 0
    while pos < len(text):
        line = text[pos:pos + span]
        newline = line.find("\n")
        if newline != -1:
            line = line[:newline]
        check_truncation = len(line) >= span
        line = trimmed_string(line)
        if not check_truncation:
            pos += len(line) + 1
        else:
            last_space = max(line.rfind(char) for char in _WHITESPACE)
            if last_space != -1:
                line = line[:last_space]
                pos += last_space + 1
            else:
                pos += span
        if line:
            lines.append(" " * indent + line)
    return "\n".join(lines)