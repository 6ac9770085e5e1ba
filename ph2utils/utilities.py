"""Small helpers: timing, console pauses, dates, fit functions and integer parsing."""

import math
import sys
import time

_ULONG_MAX = 2**64 - 1
_UINT32_MASK = 0xFFFFFFFF


def time_took(start, millis):
    """Return the time since ``start`` (a ``time.time()`` value).

    The result is in whole milliseconds if ``millis`` is true, otherwise in
    whole microseconds.
    """
    elapsed_us = round((time.time() - start) * 1_000_000)
    if millis:
        return int(elapsed_us / 1000)
    return elapsed_us


def flush_line(stream):
    """Discard everything up to and including the next newline of ``stream``."""
    stream.readline()


def pause(input_stream=None, output_stream=None):
    """Prompt for Enter and wait for one character of input."""
    input_stream = sys.stdin if input_stream is None else input_stream
    output_stream = sys.stdout if output_stream is None else output_stream
    output_stream.write("Press [Enter] to continue ...")
    output_stream.flush()
    input_stream.read(1)


def current_date_time():
    """Return the local date and time as ``_dd-mm-yy_HH:MM``."""
    return time.strftime("_%d-%m-%y_%H:%M", time.localtime())


def my_erf(x, x0, width):
    """Error-function shaped S-curve centred at ``x0`` with the given width."""
    if x < x0:
        return 0.5 * math.erfc((x0 - x) / width)
    return 0.5 + 0.5 * math.erf((x - x0) / width)


def _strtoul(text, base):
    """Parse the leading unsigned integer of ``text`` like C's ``strtoul``."""
    rest = text.lstrip(" \t\n\v\f\r")
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if base == 16 and rest[:2].lower() == "0x" and rest[2:3] and rest[2] in "0123456789abcdefABCDEF":
        rest = rest[2:]
    valid = "0123456789abcdef"[:base]
    digits = []
    for char in rest:
        if char.lower() not in valid:
            break
        digits.append(char)
    if not digits:
        return 0
    value = int("".join(digits), base)
    if value > _ULONG_MAX:
        return _ULONG_MAX
    if negative:
        value = (-value) & _ULONG_MAX
    return value


def convert_any_int(text):
    """Convert a decimal or ``0x`` hexadecimal string to a 32-bit unsigned int.

    Text that holds no number gives 0, as the C library conversion does.
    """
    base = 16 if "0x" in text else 10
    return _strtoul(text, base) & _UINT32_MASK