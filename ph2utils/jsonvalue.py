"""JSON value model: typed values, truthiness, text conversion and serialisation."""

import enum
import math

INDENT_WIDTH = 2

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class JsonType(enum.Enum):
    """The kinds of value a :class:`JsonValue` can hold."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


_DEFAULTS = {
    JsonType.NULL: lambda: None,
    JsonType.BOOLEAN: lambda: False,
    JsonType.NUMBER: lambda: 0.0,
    JsonType.STRING: str,
    JsonType.ARRAY: list,
    JsonType.OBJECT: dict,
}


def serialize_str(text):
    """Return ``text`` as a quoted JSON string literal."""
    parts = ['"']
    for char in text:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif ord(char) < 0x20 or char == "\x7f":
            parts.append("\\u%04x" % (ord(char) & 0xFF))
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def number_to_str(number):
    """Format a number: integral values below 2**53 without a fraction, others with 17 digits."""
    if abs(number) < 2**53 and math.modf(number)[0] == 0:
        return "%.f" % number
    return "%.17g" % number


class JsonValue:
    """A JSON value: null, boolean, number, string, array or object.

    Arrays hold :class:`JsonValue` items and objects map strings to
    :class:`JsonValue` items; plain Python data given to the constructor is
    converted recursively. Numbers are stored as floats and must be finite.
    """

    __slots__ = ("_type", "_value")

    def __init__(self, value=None):
        if isinstance(value, JsonValue):
            self._type = value._type
            if value._type is JsonType.ARRAY:
                self._value = [JsonValue(item) for item in value._value]
            elif value._type is JsonType.OBJECT:
                self._value = {key: JsonValue(item) for key, item in value._value.items()}
            else:
                self._value = value._value
        elif isinstance(value, JsonType):
            self._type = value
            self._value = _DEFAULTS[value]()
        elif value is None:
            self._type = JsonType.NULL
            self._value = None
        elif isinstance(value, bool):
            self._type = JsonType.BOOLEAN
            self._value = value
        elif isinstance(value, (int, float)):
            number = float(value)
            if not math.isfinite(number):
                raise OverflowError("JSON numbers must be finite")
            self._type = JsonType.NUMBER
            self._value = number
        elif isinstance(value, str):
            self._type = JsonType.STRING
            self._value = value
        elif isinstance(value, (list, tuple)):
            self._type = JsonType.ARRAY
            self._value = [JsonValue(item) for item in value]
        elif isinstance(value, dict):
            converted = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise TypeError(f"JSON object keys must be strings, not {type(key).__name__}")
                converted[key] = JsonValue(item)
            self._type = JsonType.OBJECT
            self._value = converted
        else:
            raise TypeError(f"cannot make a JSON value from {type(value).__name__}")

    @property
    def kind(self):
        """The :class:`JsonType` of this value."""
        return self._type

    def is_type(self, kind):
        """Return whether this value is of the given :class:`JsonType`."""
        return self._type is kind

    def _require(self, kind):
        if self._type is not kind:
            raise TypeError(f"JSON value is {self._type.value}, not {kind.value}")

    def get(self, key=None):
        """Return the stored value, an array item or an object member.

        Without ``key`` the underlying Python value is returned (the list or
        dict itself for containers). An integer ``key`` indexes an array and a
        string ``key`` looks up an object member; a missing item gives a null
        value. Raises ``TypeError`` if the value is not of the needed kind.
        """
        if key is None:
            return self._value
        if isinstance(key, int) and not isinstance(key, bool):
            self._require(JsonType.ARRAY)
            if 0 <= key < len(self._value):
                return self._value[key]
            return JsonValue()
        if isinstance(key, str):
            self._require(JsonType.OBJECT)
            return self._value.get(key, JsonValue())
        raise TypeError(f"invalid JSON key type: {type(key).__name__}")

    def contains(self, key):
        """Return whether an array has index ``key`` or an object has member ``key``."""
        if isinstance(key, int) and not isinstance(key, bool):
            self._require(JsonType.ARRAY)
            return 0 <= key < len(self._value)
        if isinstance(key, str):
            self._require(JsonType.OBJECT)
            return key in self._value
        raise TypeError(f"invalid JSON key type: {type(key).__name__}")

    def evaluate_as_boolean(self):
        """Return the truth of this value: null, false, 0 and "" are false, containers true."""
        if self._type is JsonType.NULL:
            return False
        if self._type in (JsonType.BOOLEAN, JsonType.NUMBER, JsonType.STRING):
            return bool(self._value)
        return True

    def __bool__(self):
        return self.evaluate_as_boolean()

    def to_str(self):
        """Return a plain text form: strings as they are, containers by their type name."""
        if self._type is JsonType.NULL:
            return "null"
        if self._type is JsonType.BOOLEAN:
            return "true" if self._value else "false"
        if self._type is JsonType.NUMBER:
            return number_to_str(self._value)
        if self._type is JsonType.STRING:
            return self._value
        return self._type.value

    def serialize(self, prettify=False):
        """Return the JSON text; pretty output is indented and ends with a newline."""
        out = []
        self._serialize(out, 0 if prettify else -1)
        return "".join(out)

    def _serialize(self, out, indent):
        if self._type is JsonType.STRING:
            out.append(serialize_str(self._value))
        elif self._type is JsonType.ARRAY:
            out.append("[")
            if indent != -1:
                indent += 1
            for position, item in enumerate(self._value):
                if position:
                    out.append(",")
                if indent != -1:
                    out.append(_newline(indent))
                item._serialize(out, indent)
            if indent != -1:
                indent -= 1
                if self._value:
                    out.append(_newline(indent))
            out.append("]")
        elif self._type is JsonType.OBJECT:
            out.append("{")
            if indent != -1:
                indent += 1
            for position, key in enumerate(sorted(self._value)):
                if position:
                    out.append(",")
                if indent != -1:
                    out.append(_newline(indent))
                out.append(serialize_str(key))
                out.append(":")
                if indent != -1:
                    out.append(" ")
                self._value[key]._serialize(out, indent)
            if indent != -1:
                indent -= 1
                if self._value:
                    out.append(_newline(indent))
            out.append("}")
        else:
            out.append(self.to_str())
        if indent == 0:
            out.append("\n")

    def __eq__(self, other):
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self._type is other._type and self._value == other._value

    __hash__ = None

    def __str__(self):
        return self.serialize()

    def __repr__(self):
        return f"JsonValue({self.serialize()})"


def _newline(indent):
    return "\n" + " " * (indent * INDENT_WIDTH)