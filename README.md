# ph2utils

A small set of utilities for acquisition and test tooling:

- `ph2utils.argvparser`: a POSIX-style command-line parser (`ArgvParser`)
  that supports long and short options, option alternatives, required
  options, grouped short options (`-abc`), `option=value` assignments,
  a help option and a generated usage text. `parse` returns a
  `ParserResult`; option attributes are given as `OptionAttribute` flags.
  All options must come before the first plain argument.
- `ph2utils.cmdline`: the string helpers behind the parser.
  `split_string`, `split_option_and_value`, `trimmed_string`,
  `expand_range_string` (`"1,3-5,25-20"` gives
  `[1, 3, 4, 5, 25, 24, 23, 22, 21, 20]`) and `format_string` for wrapping
  text to a terminal width.
- `ph2utils.jsonvalue` and `ph2utils.jsonparse`: a lightweight JSON value
  type (`JsonValue`, `JsonType`) with compact and pretty serialisation, and
  a parser (`parse`, `parse_stream`, `validate`) that raises
  `JsonParseError` with the line number of a syntax error.
- `ph2utils.timer`: a `Timer` for measuring and reporting elapsed
  wall-clock time.
- `ph2utils.utilities`: `convert_any_int` (decimal or `0x` hex text to a
  32-bit unsigned integer), `my_erf` (the error-function S-curve),
  `current_date_time`, `time_took`, `pause` and `flush_line`.
- `ph2utils.consolecolor`: ANSI colour codes and `colorize`.

## Installation

```
pip install .
```

## Parsing a command line

```python
from ph2utils.argvparser import ArgvParser, OptionAttribute, ParserResult

cmd = ArgvParser()
cmd.set_introductory_description("Run a calibration.")
cmd.set_help_option("h", "help", "Print this help")
cmd.define_option("file", "Hardware description file", OptionAttribute.REQUIRES_VALUE)
cmd.define_option_alternative("file", "f")

result = cmd.parse(["-f", "settings.xml", "extra"])
if result != ParserResult.NO_ERROR:
    print(cmd.parse_error_description(result))
else:
    print(cmd.option_value("file"), cmd.all_arguments())
```

Defining an option twice, or a single digit as an option name, raises
`ValueError`. `option_value` raises `KeyError` for an undefined option.

## Working with JSON

```python
from ph2utils.jsonparse import parse
from ph2utils.jsonvalue import JsonValue

value = parse('{"threshold": 120, "enabled": true}')
print(value.get("threshold").to_str())   # 120
print(JsonValue([1, "two", None]).serialize(False))   # [1,"two",null]
```

## Timing

```python
from ph2utils.timer import Timer

timer = Timer()
timer.start()
...
timer.stop()
print(timer.elapsed())
timer.show("Calibration")
```

## What it does not do

The package holds only these general helpers. It does not talk to
hardware, decode acquisition event data or read XML configuration files,
and it installs no command of its own.

## Tests

```
pip install .[test]
pytest
```