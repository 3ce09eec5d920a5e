import math

import pytest

from clikit.values import (
    FloatValue,
    GenericValue,
    IntegerConfig,
    IntValue,
    NumberError,
    StringValue,
    UintValue,
)


@pytest.mark.parametrize(
    "bits, text, expected",
    [
        (64, "-234567", -234567),
        (8, "127", 127),
        (16, "32767", 32767),
        (32, "2147483647", 2147483647),
        (64, "-2147483648", -2147483648),
    ],
)
def test_int_valid(bits, text, expected):
    value = IntValue(bits=bits)
    value.set(text)
    assert value.get() == expected


@pytest.mark.parametrize("bits", [8, 16, 32, 64])
def test_int_invalid(bits):
    value = IntValue(bits=bits)
    with pytest.raises(NumberError) as info:
        value.set("gopher")
    assert info.value.reason == "invalid syntax"
    assert value.get() == 0


@pytest.mark.parametrize("bits, text", [(16, "32768"), (32, "2147483648"), (8, "-129")])
def test_int_out_of_range(bits, text):
    with pytest.raises(NumberError) as info:
        IntValue(bits=bits).set(text)
    assert info.value.reason == "value out of range"


def test_int_minimum_fits():
    value = IntValue(bits=8)
    value.set("-128")
    assert value.get() == -128


@pytest.mark.parametrize("config", [IntegerConfig(), IntegerConfig(base=10)])
def test_int_ext_decimal(config):
    value = IntValue(config=config)
    value.set("234567")
    assert str(value) == "234567"


def test_int_hex_base():
    value = IntValue(config=IntegerConfig(base=16))
    value.set("FFFF")
    assert value.get() == 0xFFFF
    assert str(value) == "ffff"
    assert value.to_string(255) == "ff"


@pytest.mark.parametrize(
    "text, expected",
    [("0x1f", 31), ("0o17", 15), ("017", 15), ("0b101", 5), ("1_000", 1000), ("0", 0), ("+5", 5)],
)
def test_int_base_zero_prefixes(text, expected):
    value = IntValue()
    value.set(text)
    assert value.get() == expected


@pytest.mark.parametrize("text", ["", " 12", "1__0", "_1", "1_", "0x", "09"])
def test_int_base_zero_rejects(text):
    with pytest.raises(NumberError):
        IntValue().set(text)


def test_int_underscore_needs_base_zero():
    with pytest.raises(NumberError):
        IntValue(config=IntegerConfig(base=10)).set("1_000")


def test_int_invalid_base():
    with pytest.raises(NumberError) as info:
        IntValue(config=IntegerConfig(base=40)).set("1")
    assert "invalid base" in str(info.value)


def test_int_default_must_fit():
    with pytest.raises(ValueError):
        IntValue(200, bits=8)


@pytest.mark.parametrize(
    "bits, text, expected",
    [
        (64, "234567", 234567),
        (8, "255", 255),
        (16, "65535", 65535),
        (32, "2147483648", 2147483648),
        (64, "21474836480", 21474836480),
    ],
)
def test_uint_valid(bits, text, expected):
    value = UintValue(bits=bits)
    value.set(text)
    assert value.get() == expected


@pytest.mark.parametrize("text", ["gopher", "-1", "+1"])
def test_uint_invalid(text):
    with pytest.raises(NumberError) as info:
        UintValue().set(text)
    assert info.value.reason == "invalid syntax"


@pytest.mark.parametrize("bits, text", [(16, "65536"), (32, "4294967297"), (8, "256")])
def test_uint_out_of_range(bits, text):
    with pytest.raises(NumberError) as info:
        UintValue(bits=bits).set(text)
    assert info.value.reason == "value out of range"


@pytest.mark.parametrize(
    "config, text, expected",
    [
        (IntegerConfig(), "234567", "234567"),
        (IntegerConfig(base=10), "234567", "234567"),
        (IntegerConfig(base=16), "39447", "39447"),
        (IntegerConfig(base=16), "FFFF", "ffff"),
    ],
)
def test_uint_ext(config, text, expected):
    value = UintValue(config=config)
    value.set(text)
    assert str(value) == expected


def test_uint_hex_value():
    value = UintValue(config=IntegerConfig(base=16))
    value.set("39447")
    assert value.get() == 0x39447


@pytest.mark.parametrize(
    "bits, text, expected",
    [
        (64, "-234567", -234567.0),
        (32, "2147483647", 2147483648.0),
        (64, "-2147483648", -2147483648.0),
        (64, "0x1p-2", 0.25),
        (64, "1_000.5", 1000.5),
        (64, ".5e1", 5.0),
    ],
)
def test_float_valid(bits, text, expected):
    value = FloatValue(bits=bits)
    value.set(text)
    assert value.get() == expected


@pytest.mark.parametrize("bits", [32, 64])
def test_float_invalid(bits):
    with pytest.raises(NumberError) as info:
        FloatValue(bits=bits).set("gopher")
    assert info.value.reason == "invalid syntax"


@pytest.mark.parametrize("text", ["", " 1", "0x1", "1e", "+nan", "1__0"])
def test_float_rejects(text):
    with pytest.raises(NumberError):
        FloatValue().set(text)


@pytest.mark.parametrize("bits, text", [(64, "1e400"), (32, "1e39")])
def test_float_out_of_range(bits, text):
    with pytest.raises(NumberError) as info:
        FloatValue(bits=bits).set(text)
    assert info.value.reason == "value out of range"


def test_float_special_values():
    value = FloatValue()
    value.set("-Infinity")
    assert value.get() == -math.inf
    value.set("NaN")
    assert math.isnan(value.get())
    assert str(value) == "NaN"


def test_float_string():
    assert str(FloatValue(100.0)) == "100"


@pytest.mark.parametrize(
    "number, bits, expected",
    [
        (0.0, 64, "0"),
        (1.5, 64, "1.5"),
        (123456.0, 64, "123456"),
        (1e6, 64, "1e+06"),
        (0.0001, 64, "0.0001"),
        (0.00001, 64, "1e-05"),
        (-2.5, 64, "-2.5"),
        (2147483648.0, 32, "2.1474836e+09"),
        (0.1, 32, "0.1"),
        (math.inf, 64, "+Inf"),
    ],
)
def test_float_to_string(number, bits, expected):
    assert FloatValue(bits=bits).to_string(number) == expected


def test_float32_rounds_default():
    assert FloatValue(0.1, bits=32).get() != 0.1
    assert str(FloatValue(0.1, bits=32)) == "0.1"


def test_string_value():
    value = StringValue("a")
    value.set("hello")
    assert value.get() == "hello"
    assert str(value) == "hello"
    assert value.to_string("x") == "x"


def test_generic_delegates():
    inner = IntValue()
    value = GenericValue(inner)
    value.set("42")
    assert value.get() == 42
    assert inner.get() == 42
    assert str(value) == "42"
    assert value.to_string(inner) == "42"
    assert value.is_bool_flag() is False


def test_generic_empty():
    value = GenericValue()
    value.set("ignored")
    assert value.get() is None
    assert str(value) == ""
    assert value.to_string(None) == ""
    assert value.is_bool_flag() is False


class _Switch:
    def __init__(self):
        self.on = False

    def set(self, text):
        self.on = text == "true"

    def get(self):
        return self.on

    def is_bool_flag(self):
        return True

    def __str__(self):
        return "true" if self.on else "false"


def test_generic_bool_flag():
    value = GenericValue(_Switch())
    assert value.is_bool_flag() is True
    value.set("true")
    assert value.get() is True
    assert str(value) == "true"


def test_number_error_message():
    with pytest.raises(NumberError) as info:
        IntValue().set("gopher")
    assert str(info.value) == 'parse_int: parsing "gopher": invalid syntax'
    assert info.value.num == "gopher"