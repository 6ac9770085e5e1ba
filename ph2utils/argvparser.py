"""POSIX-like command line parser with option alternatives and generated usage text."""

import enum
import sys

from ph2utils.cmdline import (
    format_string,
    is_digit,
    is_valid_long_option_string,
    is_valid_option_string,
    split_option_and_value,
)


class OptionAttribute(enum.IntFlag):
    """Attributes an option may carry."""

    NONE = 0x00
    REQUIRES_VALUE = 0x01
    REQUIRED = 0x02


class ParserResult(enum.IntEnum):
    """Outcome of :meth:`ArgvParser.parse`."""

    NO_ERROR = 0x00
    UNKNOWN_OPTION = 0x01
    MISSING_VALUE = 0x02
    OPTION_AFTER_ARGUMENT = 0x04
    MALFORMED_MULTIPLE_SHORT_OPTION = 0x08
    REQUIRED_OPTION_MISSING = 0x16
    HELP_REQUESTED = 0x32


class ArgvParser:
    """Parses options followed by plain arguments.

    Options are defined with :meth:`define_option`; each may have several
    names (see :meth:`define_option_alternative`). All options must come
    before the first plain argument. Valid syntaxes include
    ``--long value -sdfgh -u=5 -i 7 --last=val arg1 arg2``.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Forget all definitions, parsed options and arguments."""
        self._max_key = 1
        self._option_keys = {}
        self._attributes = {}
        self._descriptions = {}
        self._values = {}
        self._error_codes = {}
        self._arguments = []
        self._intro = ""
        self._error_option = ""
        self._help_key = 0

    # definitions

    def _key(self, name):
        return self._option_keys.get(name, -1)

    def _alternatives(self, key):
        return sorted(name for name, k in self._option_keys.items() if k == key)

    @staticmethod
    def _check_label(name):
        if len(name) == 1 and is_digit(name):
            raise ValueError(f"digits are not allowed as short option labels: {name!r}")

    def define_option(self, name, description="", attributes=OptionAttribute.NONE):
        """Define an option; raise ``ValueError`` if the name is taken or a digit."""
        if self.is_defined_option(name):
            raise ValueError(f"option already defined: {name!r}")
        self._check_label(name)
        key = self._max_key
        self._option_keys[name] = key
        self._attributes[key] = OptionAttribute(attributes)
        if description:
            self._descriptions[key] = description
        self._max_key += 1

    def define_option_alternative(self, original, alternative):
        """Give the option ``original`` the additional name ``alternative``."""
        if not self.is_defined_option(original):
            raise ValueError(f"original option is not defined: {original!r}")
        self._check_label(alternative)
        if self.is_defined_option(alternative):
            raise ValueError(f"option already defined: {alternative!r}")
        self._option_keys[alternative] = self._key(original)

    def is_defined_option(self, name):
        """Return whether ``name`` is a defined option name."""
        return name in self._option_keys

    def found_option(self, name):
        """Return whether option ``name`` is defined and was given on the command line."""
        key = self._key(name)
        return key != -1 and key in self._values

    def set_help_option(self, shortname="h", longname="help", description=""):
        """Define the option whose presence makes :meth:`parse` report a help request."""
        if self.is_defined_option(shortname) or self.is_defined_option(longname):
            raise ValueError("short or long help option label equals an already defined option")
        self._check_label(shortname)
        self._check_label(longname)
        if shortname == longname:
            raise ValueError("short and long help option labels must differ")
        self.define_option(shortname, description, OptionAttribute.NONE)
        self.define_option_alternative(shortname, longname)
        self._help_key = self._max_key - 1

    def add_error_code(self, code, description=""):
        """Add a return code and its meaning to the usage text."""
        self._error_codes[code] = description

    def set_introductory_description(self, description):
        """Set the text shown before the list of options."""
        self._intro = description

    # results

    def arguments(self):
        """Return the number of plain arguments read."""
        return len(self._arguments)

    def argument(self, index):
        """Return the plain argument at ``index``; raise ``IndexError`` if there is none."""
        if not 0 <= index < len(self._arguments):
            raise IndexError(f"no argument with index {index}")
        return self._arguments[index]

    def all_arguments(self):
        """Return all plain arguments in command line order."""
        return list(self._arguments)

    def option_value(self, option):
        """Return the value given to ``option``, or ``""`` if it was not given.

        Raises ``KeyError`` if ``option`` is not a defined option.
        """
        key = self._key(option)
        if key == -1:
            raise KeyError(option)
        return self._values.get(key, "")

    def error_option(self):
        """Return the option that caused the last parse error, or ``""``."""
        return self._error_option

    # parsing

    def _requires_value(self, key):
        return bool(self._attributes[key] & OptionAttribute.REQUIRES_VALUE)

    def parse(self, argv=None):
        """Parse ``argv`` (without the program name; defaults to ``sys.argv[1:]``)."""
        args = list(sys.argv[1:] if argv is None else argv)
        finished_options = False
        i = 0
        while i < len(args):
            argument = args[i]
            if not is_valid_option_string(argument):
                finished_options = True
                self._arguments.append(argument)
                i += 1
                continue
            if finished_options:
                self._error_option = argument
                return ParserResult.OPTION_AFTER_ARGUMENT

            if is_valid_long_option_string(argument):
                option, value = split_option_and_value(argument[2:])
                value = value or ""
                if not self.is_defined_option(option):
                    self._error_option = option
                    return ParserResult.UNKNOWN_OPTION
                key = self._option_keys[option]
                if key == self._help_key:
                    return ParserResult.HELP_REQUESTED
                if self._requires_value(key) and not value:
                    if i + 1 >= len(args):
                        self._error_option = option
                        return ParserResult.MISSING_VALUE
                    i += 1
                    if is_valid_option_string(args[i]):
                        self._error_option = option
                        return ParserResult.MISSING_VALUE
                    value = args[i]
                self._values[key] = value
            else:
                argument = argument[1:]
                option, value = split_option_and_value(argument)
                if value is not None:
                    if len(option) > 1:
                        self._error_option = option
                        return ParserResult.MALFORMED_MULTIPLE_SHORT_OPTION
                    if not self.is_defined_option(option):
                        self._error_option = option
                        return ParserResult.UNKNOWN_OPTION
                    key = self._option_keys[option]
                    if key == self._help_key:
                        return ParserResult.HELP_REQUESTED
                    if self._requires_value(key) and not value:
                        self._error_option = option
                        return ParserResult.MISSING_VALUE
                    self._values[key] = value
                elif len(argument) == 1:
                    if not self.is_defined_option(argument):
                        self._error_option = argument
                        return ParserResult.UNKNOWN_OPTION
                    key = self._option_keys[argument]
                    if key == self._help_key:
                        return ParserResult.HELP_REQUESTED
                    if self._requires_value(key):
                        if i + 1 >= len(args):
                            self._error_option = argument
                            return ParserResult.MISSING_VALUE
                        i += 1
                        if is_valid_option_string(args[i]):
                            self._error_option = argument
                            return ParserResult.MISSING_VALUE
                        self._values[key] = args[i]
                    else:
                        self._values[key] = ""
                else:
                    for char in argument:
                        if not self.is_defined_option(char):
                            self._error_option = char
                            return ParserResult.UNKNOWN_OPTION
                        key = self._option_keys[char]
                        if key == self._help_key:
                            return ParserResult.HELP_REQUESTED
                        self._values[key] = ""
            i += 1

        for key, attributes in self._attributes.items():
            if attributes & OptionAttribute.REQUIRED and key not in self._values:
                self._error_option = self._option_list(key)
                return ParserResult.REQUIRED_OPTION_MISSING

        return ParserResult.NO_ERROR

    def _option_list(self, key, show_value=False):
        parts = []
        for name in self._alternatives(key):
            text = ("--" if len(name) > 1 else "-") + name
            if show_value and self._requires_value(key):
                text += " <value>"
            parts.append(text)
        return ", ".join(parts)

    # descriptions

    def parse_error_description(self, error_code):
        """Return a human-readable text for a :class:`ParserResult`."""
        try:
            code = ParserResult(error_code)
        except ValueError:
            raise ValueError(f"unknown parser result code: {error_code!r}") from None
        option = self._error_option
        if code is ParserResult.NO_ERROR:
            return ""
        if code is ParserResult.UNKNOWN_OPTION:
            return f"Unknown option: '{option}'"
        if code is ParserResult.MISSING_VALUE:
            return f"Missing required value for option: '{option}'"
        if code is ParserResult.OPTION_AFTER_ARGUMENT:
            return (
                f"Misplaced option '{option}' detected. "
                "All option have to be BEFORE the first argument"
            )
        if code is ParserResult.MALFORMED_MULTIPLE_SHORT_OPTION:
            return f"Malformed short-options: '{option}'"
        if code is ParserResult.REQUIRED_OPTION_MISSING:
            return f"Required option missing: '{option}'"
        return self.usage_description()

    def usage_description(self, width=80):
        """Return the usage text for all options, wrapped to ``width`` columns."""
        usage = ""
        if self._intro:
            usage += format_string(self._intro, width) + "\n\n"
        if self._max_key > 1:
            usage += format_string("Available options\n-----------------", width) + "\n"

        for key, attributes in self._attributes.items():
            line = self._option_list(key, show_value=True)
            if attributes & OptionAttribute.REQUIRED:
                line += " [required]"
            usage += format_string(line, width) + "\n"
            description = self._descriptions.get(key, "(no description)")
            usage += format_string(description, width, 4)
            usage += "\n\n"

        if not self._error_codes:
            return usage

        usage += format_string("Return codes\n-----------------", width) + "\n"
        for code in sorted(self._error_codes):
            label = format_string(str(code), width, 4)
            descr = format_string(self._error_codes[code], width, 10)
            usage += label + descr[len(label):] + "\n"
        return usage