# clikit

Building blocks for command-line applications: values that parse command-line
text into Python objects, timestamps parsed against a list of layouts, help
text layout helpers, and "did you mean" suggestions for mistyped names.

Requires Python 3.10 or later and has no runtime dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `clikit.values`: single values that are set from text and read back.
  - `IntValue` and `UintValue`: integers of a fixed bit width (`bits`,
    default 64), parsed in the base given by an `IntegerConfig` (`base`;
    0 infers it from a `0b`, `0o`, `0x` or `0` prefix). `to_string` renders
    in the same base.
  - `FloatValue`: a 32- or 64-bit float, rendered in its shortest form
    (`100.0` renders as `100`).
  - `StringValue`: a plain string.
  - `GenericValue`: wraps any object with `set`/`get` and delegates to it;
    `is_bool_flag()` reports whether the wrapped object says it takes no
    argument.
  - `Value`: the protocol these share (`set`, `get`, `str()`).
  - `NumberError`: a `ValueError` raised for text that is not a number, or a
    number out of range for the bit width.
- `clikit.timestamp`: `TimestampValue`, parsed with the first matching
  `strptime` layout from a `TimestampConfig` (`layouts`, `timezone`; UTC when
  none is given). A layout without a date takes today's date; one with a date
  but no year takes the current year. The clock can be replaced with the
  `clock` argument.
- `clikit.text`: help layout helpers: `indent`, `nindent`, `wrap`,
  `wrap_line`, `offset`, `offset_commands`, `subtract` and
  `cli_arg_contains`.
- `clikit.suggestions`: `jaro_distance`, `jaro_winkler`, `suggest_flag`,
  `suggest_command` and `did_you_mean`. The suggest functions take objects
  with a `names()` method; the help names `help` and `h` are candidates too
  (for flags, unless `hide_help` is set).
- `clikit.ordering`: `lexicographic_less`, alphabetical order that compares
  case-insensitively first and puts upper case first on ties.

## Example

```python
from datetime import datetime, timezone

from clikit.values import IntValue, IntegerConfig, NumberError
from clikit.timestamp import TimestampConfig, TimestampValue
from clikit.text import indent
from clikit.suggestions import did_you_mean
from clikit.ordering import lexicographic_less

small = IntValue(bits=16)
small.set("42")
assert small.get() == 42
try:
    small.set("32768")
except NumberError as exc:
    print(exc)  # value out of range

hexadecimal = IntValue(config=IntegerConfig(base=16))
hexadecimal.set("ff")
assert hexadecimal.get() == 255 and str(hexadecimal) == "ff"

stamp = TimestampValue(config=TimestampConfig(layouts=["%Y-%m-%d"]))
stamp.set("2024-01-31")
assert stamp.get() == datetime(2024, 1, 31, tzinfo=timezone.utc)

assert indent(2, "a\nb") == "  a\n  b"
assert did_you_mean("config") == 'Did you mean "config"?'
assert lexicographic_less("A", "a")
```

## What this package does not do

There is no command or flag definition, no argument parser, no help
renderer, no values that collect several items (lists or key=value maps),
no mutually exclusive flag groups and no shell completion output. The
modules above are pieces such a framework is built from; wiring them into a
running command-line program is left to the caller.