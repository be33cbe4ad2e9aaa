"""Textual forms of numbers and string escapes used by atoms."""

from __future__ import annotations

import math
import re
from typing import Optional, Union

from .chars import decode_escape, digit_value, is_digit, is_hex_digit, to_lower

__all__ = ["format_int", "format_float", "parse_number", "normalize_escapes", "MAX_NUMBER_LENGTH"]

MAX_NUMBER_LENGTH = 70

_INT64_MAX = (1 << 63) - 1
_UINT64_MASK = (1 << 64) - 1

Number = Union[int, float]


def format_int(value: int) -> str:
    """Decimal text of a 64-bit signed integer."""
    value = int(value)
    if not -(1 << 63) <= value <= _INT64_MAX:
        raise OverflowError(f"integer {value} does not fit in 64 bits")
    return str(value)


def format_float(value: float) -> str:
    """Text of a float rounded to six decimals, trailing zeros dropped."""
    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    negative = value < 0
    val = (-value if negative else value) + 0.0000005
    int_part = int(val)
    frac = max(val - float(int_part), 0.0)

    digits = []
    for _ in range(6):
        frac *= 10.0
        digit = int(frac)
        digits.append(str(digit))
        frac -= float(digit)

    fraction = "".join(digits).rstrip("0") or "0"
    return f"{'-' if negative else ''}{int_part}.{fraction}"


def _signed(sign: int, magnitude: int) -> Optional[int]:
    if sign < 0:
        if magnitude > _INT64_MAX + 1:
            return None
        return -magnitude
    if magnitude > _INT64_MAX:
        return None
    return magnitude


def _parse_based(body: str, base: int, sign: int) -> Optional[int]:
    value = 0
    has_digits = False
    for ch in body:
        if ch == "_":
            if not has_digits:
                return None
            continue
        digit = digit_value(ch) if is_hex_digit(ch) else None
        if digit is None or digit >= base:
            return None
        value = (value * base + digit) & _UINT64_MASK
        has_digits = True
    if not has_digits or body.endswith("_"):
        return None
    return _signed(sign, value)


def _power_of_ten(exponent: int) -> float:
    result = 1.0
    base = 10.0
    while exponent > 0:
        if exponent % 2:
            result *= base
        base *= base
        exponent //= 2
    return result


def _parse_decimal(text: str, start: int, sign: int) -> Optional[Number]:
    end = len(text)
    p = start
    is_float = in_fraction = in_exponent = False
    has_digits = section_has_digits = False
    int_value = 0
    float_value = 0.0
    fraction_div = 10.0
    exp_sign = 1
    exp_value = 0
    exponent_digits = 0

    if text[p] == ".":
        is_float = in_fraction = True
        p += 1

    while p < end:
        ch = text[p]
        if ch == "_":
            if not section_has_digits:
                return None
            p += 1
            continue
        if is_digit(ch):
            digit = digit_value(ch)
            has_digits = section_has_digits = True
            if in_exponent:
                exp_value = exp_value * 10 + digit
                exponent_digits += 1
            elif in_fraction:
                float_value += digit / fraction_div
                fraction_div *= 10.0
            else:
                int_value = (int_value * 10 + digit) & _UINT64_MASK
                float_value = float_value * 10.0 + digit
        elif ch == "." and not in_fraction and not in_exponent:
            if text[p - 1] == "_":
                return None
            is_float = in_fraction = True
            section_has_digits = False
        elif to_lower(ch) == "e" and not in_exponent and has_digits:
            if text[p - 1] == "_":
                return None
            is_float = in_exponent = True
            section_has_digits = False
            p += 1
            if p < end and text[p] in "+-":
                if text[p] == "-":
                    exp_sign = -1
                p += 1
            continue
        else:
            return None
        p += 1

    if in_exponent and exponent_digits == 0:
        return None
    if not has_digits or text.endswith("_"):
        return None

    if not is_float:
        return _signed(sign, int_value)

    result = float_value
    if in_exponent and exp_value != 0:
        multiplier = _power_of_ten(exp_value)
        result = result / multiplier if exp_sign < 0 else result * multiplier
    return sign * result


def parse_number(text: str) -> Optional[Number]:
    """Integer or float written in ``text``, or None when it is not a number."""
    if not text or len(text) >= MAX_NUMBER_LENGTH:
        return None

    sign = 1
    p = 0
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        p = 1
    if p == len(text):
        return None

    rest = text[p:]
    if len(rest) == 3:
        lowered = rest.lower()
        if lowered == "inf":
            return math.inf if sign > 0 else -math.inf
        if lowered == "nan" and p == 0:
            return math.nan

    if len(rest) > 1 and rest[0] == "0":
        base = {"x": 16, "o": 8, "b": 2}.get(to_lower(rest[1]))
        if base is not None:
            return _parse_based(rest[2:], base, sign)

    return _parse_decimal(text, p, sign)


_ESCAPE = re.compile(r"\\(?:x(..)|(.))", re.DOTALL)


def _replace_escape(match: "re.Match[str]") -> str:
    hex_pair = match.group(1)
    if hex_pair is not None:
        high = digit_value(hex_pair[0]) or 0
        low = digit_value(hex_pair[1]) or 0
        return chr((high << 4) | low)
    return decode_escape(match.group(2)) or ""


def normalize_escapes(text: str) -> str:
    """Replace backslash escapes with the characters they stand for.

    Unknown escapes are dropped; a trailing lone backslash is kept.
    """
    return _ESCAPE.sub(_replace_escape, text)