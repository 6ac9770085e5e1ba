"""JSON text parser producing :class:`~ph2utils.jsonvalue.JsonValue` objects.

Only the first value of the input is read; anything after it is ignored.
Errors are reported with the line number and the rest of the offending line.
"""

import math

from ph2utils.jsonvalue import JsonValue

_DIGITS = frozenset("0123456789")
_HEX = frozenset("0123456789abcdefABCDEF")
_NUMBER_CHARS = frozenset("0123456789+-eE.")
_WHITESPACE = frozenset(" \t\n\r")
_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class JsonParseError(ValueError):
    """Raised when the input is not well-formed JSON."""

    def __init__(self, message, line=1):
        super().__init__(message)
        self.message = message
        self.line = line


class _Syntax(Exception):
    """Internal signal that the input does not match the grammar."""


class _Reader:
    """Character reader with one character of push-back and line counting."""

    def __init__(self, text):
        self._text = text
        self._pos = 0
        self._last = ""
        self._ungot = False
        self.line = 1

    def getc(self):
        """Return the next character, or ``""`` at the end of the input."""
        if self._ungot:
            self._ungot = False
            return self._last
        if self._pos >= len(self._text):
            self._last = ""
            return ""
        if self._last == "\n":
            self.line += 1
        self._last = self._text[self._pos]
        self._pos += 1
        return self._last

    def ungetc(self):
        """Push the last character back, unless the end was reached."""
        if self._last != "":
            self._ungot = True

    def skip_ws(self):
        while True:
            ch = self.getc()
            if ch not in _WHITESPACE:
                self.ungetc()
                return

    def expect(self, wanted):
        """Skip whitespace and consume ``wanted`` if it comes next."""
        self.skip_ws()
        if self.getc() != wanted:
            self.ungetc()
            return False
        return True

    def match(self, pattern):
        for wanted in pattern:
            if self.getc() != wanted:
                self.ungetc()
                return False
        return True

    def error_message(self):
        """Describe the failure position and consume the rest of its line."""
        message = f"syntax error at line {self.line} near: "
        near = []
        while True:
            ch = self.getc()
            if ch in ("", "\n"):
                break
            if ch >= " ":
                near.append(ch)
        return message + "".join(near)


class _Parser:
    def __init__(self, reader, build):
        self._in = reader
        self._build = build

    def value(self):
        reader = self._in
        reader.skip_ws()
        ch = reader.getc()
        if ch == "n":
            if reader.match("ull"):
                return None
            raise _Syntax
        if ch == "f":
            if reader.match("alse"):
                return False
            raise _Syntax
        if ch == "t":
            if reader.match("rue"):
                return True
            raise _Syntax
        if ch == '"':
            return self._string()
        if ch == "[":
            return self._array()
        if ch == "{":
            return self._object()
        if ch in _DIGITS or ch == "-":
            reader.ungetc()
            return self._number()
        reader.ungetc()
        raise _Syntax

    def _number(self):
        reader = self._in
        chars = []
        while True:
            ch = reader.getc()
            if ch in _NUMBER_CHARS:
                chars.append(ch)
            else:
                reader.ungetc()
                break
        if not chars:
            raise _Syntax
        try:
            number = float("".join(chars))
        except ValueError:
            raise _Syntax from None
        if self._build and not math.isfinite(number):
            raise OverflowError("JSON numbers must be finite")
        return number

    def _quadhex(self):
        reader = self._in
        code = 0
        for _ in range(4):
            ch = reader.getc()
            if ch == "":
                return -1
            if ch not in _HEX:
                reader.ungetc()
                return -1
            code = code * 16 + int(ch, 16)
        return code

    def _codepoint(self):
        reader = self._in
        code = self._quadhex()
        if code == -1:
            raise _Syntax
        if 0xD800 <= code <= 0xDFFF:
            if code >= 0xDC00:
                raise _Syntax
            if reader.getc() != "\\" or reader.getc() != "u":
                reader.ungetc()
                raise _Syntax
            second = self._quadhex()
            if not 0xDC00 <= second <= 0xDFFF:
                raise _Syntax
            code = (((code - 0xD800) << 10) | ((second - 0xDC00) & 0x3FF)) + 0x10000
        return chr(code)

    def _string(self):
        reader = self._in
        out = []
        while True:
            ch = reader.getc()
            if ch == "" or ch < " ":
                reader.ungetc()
                raise _Syntax
            if ch == '"':
                return "".join(out)
            if ch != "\\":
                out.append(ch)
                continue
            ch = reader.getc()
            if ch == "":
                raise _Syntax
            if ch in _SIMPLE_ESCAPES:
                out.append(_SIMPLE_ESCAPES[ch])
            elif ch == "u":
                out.append(self._codepoint())
            else:
                raise _Syntax

    def _array(self):
        reader = self._in
        items = []
        if reader.expect("]"):
            return items
        while True:
            items.append(self.value())
            if not reader.expect(","):
                break
        if not reader.expect("]"):
            raise _Syntax
        return items

    def _object(self):
        reader = self._in
        members = {}
        if reader.expect("}"):
            return members
        while True:
            if not reader.expect('"'):
                raise _Syntax
            key = self._string()
            if not reader.expect(":"):
                raise _Syntax
            members[key] = self.value()
            if not reader.expect(","):
                break
        if not reader.expect("}"):
            raise _Syntax
        return members


def _run(text, build):
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8")
    reader = _Reader(text)
    try:
        return _Parser(reader, build).value()
    except _Syntax:
        line = reader.line
        raise JsonParseError(reader.error_message(), line) from None


def parse(text):
    """Parse the first JSON value of ``text`` and return it as a :class:`JsonValue`.

    Raises :class:`JsonParseError` on malformed input and ``OverflowError``
    for numbers that are not finite.
    """
    return JsonValue(_run(text, True))


def parse_stream(stream):
    """Read ``stream`` to the end and parse the JSON value it starts with."""
    return parse(stream.read())


def validate(text):
    """Return whether ``text`` starts with a well-formed JSON value."""
    try:
        _run(text, False)
    except JsonParseError:
        return False
    return True