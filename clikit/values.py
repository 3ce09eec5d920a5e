"""Single-value types that parse command-line text into Python values."""

from __future__ import annotations

import json
import math
import re
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "Value",
    "NumberError",
    "IntegerConfig",
    "IntValue",
    "UintValue",
    "FloatValue",
    "StringValue",
    "GenericValue",
]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_SYNTAX = "invalid syntax"
_RANGE = "value out of range"

_DECIMAL_FLOAT = re.compile(r"[+-]?(?:[0-9_]+\.?[0-9_]*|\.[0-9_]+)(?:[eE][+-]?[0-9_]+)?")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F_]+\.?[0-9a-fA-F_]*|\.[0-9a-fA-F_]+)[pP][+-]?[0-9_]+"
)


@runtime_checkable
class Value(Protocol):
    """A value that a flag can be set from text and read back from."""

    def set(self, text: str) -> None: ...

    def get(self) -> Any: ...

    def __str__(self) -> str: ...


class NumberError(ValueError):
    """Raised when text cannot be parsed as a number of the wanted kind."""

    def __init__(self, func: str, num: str, reason: str) -> None:
        self.func = func
        self.num = num
        self.reason = reason
        super().__init__(f"{func}: parsing {json.dumps(num, ensure_ascii=False)}: {reason}")


@dataclass
class IntegerConfig:
    """Configuration shared by integer values; base 0 infers it from a prefix."""

    base: int = 0


def _underscore_ok(text: str) -> bool:
    """Check that underscores only separate digits (or follow a base prefix)."""
    saw = "^"
    if text[:1] in ("+", "-"):
        text = text[1:]
    is_hex = False
    body = text
    if len(text) >= 2 and text[0] == "0" and text[1].lower() in "box":
        body = text[2:]
        saw = "0"
        is_hex = text[1].lower() == "x"
    for char in body:
        if "0" <= char <= "9" or (is_hex and "a" <= char.lower() <= "f"):
            saw = "0"
            continue
        if char == "_":
            if saw != "0":
                return False
            saw = "_"
            continue
        if saw == "_":
            return False
        saw = "!"
    return saw != "_"


def _parse_unsigned(text: str, base: int, bits: int, func: str, original: str) -> int:
    if not text:
        raise NumberError(func, original, _SYNTAX)
    base_zero = base == 0
    digits = text
    if base_zero:
        base = 10
        if text[0] == "0":
            marker = text[1].lower() if len(text) >= 3 else ""
            if marker == "b":
                base, digits = 2, text[2:]
            elif marker == "o":
                base, digits = 8, text[2:]
            elif marker == "x":
                base, digits = 16, text[2:]
            else:
                base, digits = 8, text[1:]
    elif not 2 <= base <= 36:
        raise NumberError(func, original, f"invalid base {base}")

    limit = (1 << bits) - 1
    number = 0
    underscores = False
    for char in digits:
        if char == "_" and base_zero:
            underscores = True
            continue
        digit = _DIGITS.find(char.lower())
        if digit < 0 or digit >= base:
            raise NumberError(func, original, _SYNTAX)
        number = number * base + digit
        if number > limit:
            raise NumberError(func, original, _RANGE)
    if underscores and not _underscore_ok(text):
        raise NumberError(func, original, _SYNTAX)
    return number


def _parse_uint(text: str, base: int, bits: int) -> int:
    return _parse_unsigned(text, base, bits, "parse_uint", text)


def _parse_int(text: str, base: int, bits: int) -> int:
    if not text:
        raise NumberError("parse_int", text, _SYNTAX)
    negative = text[0] == "-"
    body = text[1:] if text[0] in "+-" else text
    magnitude = _parse_unsigned(body, base, bits, "parse_int", text)
    cutoff = 1 << (bits - 1)
    if (not negative and magnitude >= cutoff) or (negative and magnitude > cutoff):
        raise NumberError("parse_int", text, _RANGE)
    return -magnitude if negative else magnitude


def _format_int(number: int, base: int) -> str:
    base = base or 10
    if not 2 <= base <= 36:
        raise ValueError(f"invalid base {base}")
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    number = abs(number)
    out = []
    while number:
        number, digit = divmod(number, base)
        out.append(_DIGITS[digit])
    return sign + "".join(reversed(out))


def _to_float32(number: float) -> float:
    return struct.unpack(">f", struct.pack(">f", number))[0]


def _special_float(text: str) -> float | None:
    lowered = text.lower()
    body = lowered[1:] if lowered[:1] in ("+", "-") else lowered
    if body in ("inf", "infinity"):
        return -math.inf if lowered.startswith("-") else math.inf
    if lowered == "nan":
        return math.nan
    return None


def _parse_float(text: str, bits: int) -> float:
    special = _special_float(text)
    if special is not None:
        return special

    is_hex = bool(_HEX_FLOAT.fullmatch(text))
    if not is_hex and not _DECIMAL_FLOAT.fullmatch(text):
        raise NumberError("parse_float", text, _SYNTAX)
    if "_" in text and not _underscore_ok(text):
        raise NumberError("parse_float", text, _SYNTAX)
    cleaned = text.replace("_", "")
    try:
        number = float.fromhex(cleaned) if is_hex else float(cleaned)
    except (ValueError, OverflowError) as exc:
        if isinstance(exc, OverflowError):
            raise NumberError("parse_float", text, _RANGE) from None
        raise NumberError("parse_float", text, _SYNTAX) from None
    if math.isinf(number):
        raise NumberError("parse_float", text, _RANGE)
    if bits == 32:
        try:
            number = _to_float32(number)
        except OverflowError:
            raise NumberError("parse_float", text, _RANGE) from None
    return number


def _shortest_digits(number: float, bits: int) -> str:
    if bits == 32:
        for precision in range(9):
            text = f"{number:.{precision}e}"
            if _to_float32(float(text)) == number:
                return text
    return repr(number)


def _format_float(number: float, bits: int) -> str:
    """Format like the shortest '%g' form: no trailing zeros, e+NN exponents."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"

    sign = "-" if number < 0 else ""
    _, digit_tuple, exponent = Decimal(_shortest_digits(abs(number), bits)).as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exponent
    digits = digits.rstrip("0") or "0"
    exp10 = point - 1

    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "+" if exp10 >= 0 else "-"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp10):02d}"

    whole = digits[:point].ljust(point, "0") if point > 0 else "0"
    fraction = ("0" * -point + digits) if point < 0 else digits[point:]
    return sign + whole + ("." + fraction if fraction else "")


class IntValue:
    """A signed integer of a fixed bit width, parsed in a configured base."""

    def __init__(self, value: int = 0, *, bits: int = 64, config: IntegerConfig | None = None) -> None:
        self.bits = bits
        self.base = (config or IntegerConfig()).base
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if not low <= value <= high:
            raise ValueError(f"{value} does not fit in {bits} bits")
        self.value = value

    def set(self, text: str) -> None:
        """Parse ``text`` and store it, raising NumberError when it is invalid."""
        self.value = _parse_int(text, self.base, self.bits)

    def get(self) -> int:
        return self.value

    def to_string(self, value: int) -> str:
        """Render ``value`` in this value's base."""
        return _format_int(value, self.base)

    def __str__(self) -> str:
        return _format_int(self.value, self.base)

    def __repr__(self) -> str:
        return f"IntValue({self.value!r}, bits={self.bits}, base={self.base})"


class UintValue:
    """An unsigned integer of a fixed bit width, parsed in a configured base."""

    def __init__(self, value: int = 0, *, bits: int = 64, config: IntegerConfig | None = None) -> None:
        self.bits = bits
        self.base = (config or IntegerConfig()).base
        if not 0 <= value < (1 << bits):
            raise ValueError(f"{value} does not fit in {bits} unsigned bits")
        self.value = value

    def set(self, text: str) -> None:
        """Parse ``text`` and store it, raising NumberError when it is invalid."""
        self.value = _parse_uint(text, self.base, self.bits)

    def get(self) -> int:
        return self.value

    def to_string(self, value: int) -> str:
        """Render ``value`` in this value's base."""
        return _format_int(value, self.base)

    def __str__(self) -> str:
        return _format_int(self.value, self.base)

    def __repr__(self) -> str:
        return f"UintValue({self.value!r}, bits={self.bits}, base={self.base})"


class FloatValue:
    """A floating-point number of 32 or 64 bits."""

    def __init__(self, value: float = 0.0, *, bits: int = 64) -> None:
        if bits not in (32, 64):
            raise ValueError(f"unsupported float width {bits}")
        self.bits = bits
        self.value = _to_float32(float(value)) if bits == 32 else float(value)

    def set(self, text: str) -> None:
        """Parse ``text`` and store it, raising NumberError when it is invalid."""
        self.value = _parse_float(text, self.bits)

    def get(self) -> float:
        return self.value

    def to_string(self, value: float) -> str:
        """Render ``value`` in its shortest form."""
        return _format_float(float(value), self.bits)

    def __str__(self) -> str:
        return _format_float(self.value, self.bits)

    def __repr__(self) -> str:
        return f"FloatValue({self.value!r}, bits={self.bits})"


class StringValue:
    """A plain string."""

    def __init__(self, value: str = "") -> None:
        self.value = value

    def set(self, text: str) -> None:
        self.value = text

    def get(self) -> str:
        return self.value

    def to_string(self, value: Any) -> str:
        """Render ``value`` as text; ``None`` renders as empty."""
        return "" if value is None else str(value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"StringValue({self.value!r})"


class GenericValue:
    """Delegates to any wrapped value; behaves as empty when nothing is wrapped."""

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def set(self, text: str) -> None:
        if self.value is not None:
            self.value.set(text)

    def get(self) -> Any:
        if self.value is not None:
            return self.value.get()
        return None

    def to_string(self, value: Any) -> str:
        return str(value) if value is not None else ""

    def is_bool_flag(self) -> bool:
        """Report whether the wrapped value takes no argument."""
        check = getattr(self.value, "is_bool_flag", None)
        return bool(callable(check) and check())

    def __str__(self) -> str:
        return str(self.value) if self.value is not None else ""

    def __repr__(self) -> str:
        return f"GenericValue({self.value!r})"