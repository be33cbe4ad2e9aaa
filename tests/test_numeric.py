import math

import pytest

from reduct.numeric import format_float, format_int, normalize_escapes, parse_number


@pytest.mark.parametrize("value", [0, 7, -42, 2**63 - 1, -(2**63)])
def test_format_int_round_trip(value):
    text = format_int(value)
    assert text == str(value)
    assert parse_number(text) == value


def test_format_int_out_of_range():
    with pytest.raises(OverflowError):
        format_int(2**63)


def test_format_float_zero():
    assert format_float(0.0) == "0.0"


def test_format_float_half():
    assert format_float(1.5) == "1.5"


@pytest.mark.parametrize("value", [0.25, -3.75, 123.456789, math.pi, math.e, 1e10, -0.001])
def test_format_float_round_trip_and_shape(value):
    text = format_float(value)
    assert "." in text
    assert not text.endswith("0") or text.endswith(".0")
    assert abs(parse_number(text) - value) <= 1e-6 * max(1.0, abs(value))


def test_format_float_special_values():
    assert parse_number(format_float(math.inf)) == math.inf
    assert parse_number(format_float(-math.inf)) == -math.inf
    assert math.isnan(parse_number(format_float(math.nan)))


@pytest.mark.parametrize("text", ["0x1F", "0b101", "0o17", "-0x10", "0XfF"])
def test_parse_prefixed_integers(text):
    assert parse_number(text) == int(text, 0)


@pytest.mark.parametrize("text", ["1_000", "+7", "-42", "0", "0x_1"])
def test_parse_decimal_and_underscores(text):
    result = parse_number(text)
    if text == "0x_1":
        assert result is None
    else:
        assert result == int(text.replace("_", ""))
        assert isinstance(result, int)


@pytest.mark.parametrize("text", ["1e3", "2.5e-1", ".5", "3.25", "-1.5", "1E2", "1.e1"])
def test_parse_floats(text):
    result = parse_number(text)
    assert isinstance(result, float)
    assert result == pytest.approx(float(text))


def test_parse_int64_limits():
    assert parse_number(str(2**63)) is None
    assert parse_number(str(-(2**63))) == -(2**63)
    assert parse_number(str(2**63 - 1)) == 2**63 - 1


def test_parse_inf_and_nan():
    assert parse_number("-INF") == -math.inf
    assert parse_number("+inf") == math.inf
    assert math.isnan(parse_number("NaN"))
    assert parse_number("-nan") is None


@pytest.mark.parametrize(
    "text",
    ["", "+", "abc", "1_", "_1", "0x", "1e", "1.2.3", "0b2", "1_.5", "1._5", "e5", ".e5", "12a", "0o8"],
)
def test_parse_rejects(text):
    assert parse_number(text) is None


def test_parse_length_limit():
    assert parse_number("0" * 69) == 0
    assert parse_number("0" * 70) is None


def test_zero_values_are_zero():
    assert parse_number("0.0") == 0.0
    assert parse_number("0x0") == 0


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a\\nb", "a\nb"),
        ("\\x41", "\x41"),
        ("\\t\\r", "\t\r"),
        ('\\"', '"'),
        ("\\e", "\x1b"),
        ("\\\\", "\\"),
        ("\\q", ""),
        ("ab\\", "ab\\"),
        ("plain", "plain"),
    ],
)
def test_normalize_escapes(raw, expected):
    assert normalize_escapes(raw) == expected


def test_normalize_short_hex_escape_is_dropped():
    assert normalize_escapes("\\x4") == "4"