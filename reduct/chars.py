"""Character classification table used by the reader and the atom parser."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import Optional, Union

__all__ = [
    "CharFlag",
    "CharInfo",
    "char_info",
    "is_whitespace",
    "is_symbol",
    "is_digit",
    "is_hex_digit",
    "is_letter",
    "to_lower",
    "to_upper",
    "digit_value",
    "decode_escape",
    "encode_escape",
]

CharLike = Union[str, int]


class CharFlag(enum.IntFlag):
    """Classes a character may belong to."""

    NONE = 0
    WHITESPACE = 1 << 0
    SYMBOL = 1 << 1
    DIGIT = 1 << 2
    HEX_DIGIT = 1 << 3
    LETTER = 1 << 4


@dataclass(frozen=True)
class CharInfo:
    """Everything the language knows about a single character."""

    flags: CharFlag
    upper: str
    lower: str
    decode_escape: Optional[str] = None
    encode_escape: Optional[str] = None
    integer: Optional[int] = None


_SYMBOLS = "!$%&*+,-./:;<=>?@^_`|~{}[]#"
_WHITESPACE = " \t\n\r"

# Escape letter -> the character it stands for.
_DECODE = {
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "?": "?",
}

# Character -> the letter used to escape it.
_ENCODE = {
    "\a": "a",
    "\b": "b",
    "\x1b": "e",
    "\f": "f",
    "\v": "v",
    "\t": "t",
    "\n": "n",
    "\r": "r",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "?": "?",
}


def _build_info(ch: str) -> CharInfo:
    flags = CharFlag.NONE
    upper = lower = ch
    integer: Optional[int] = None

    if ch in _WHITESPACE:
        flags |= CharFlag.WHITESPACE
    if ch in _SYMBOLS:
        flags |= CharFlag.SYMBOL
    if ch in string.digits:
        flags |= CharFlag.DIGIT | CharFlag.HEX_DIGIT
        integer = int(ch)
    if ch in string.ascii_letters:
        flags |= CharFlag.LETTER
        upper, lower = ch.upper(), ch.lower()
        if ch in "abcdefABCDEF":
            flags |= CharFlag.HEX_DIGIT
            integer = int(ch, 16)

    return CharInfo(
        flags=flags,
        upper=upper,
        lower=lower,
        decode_escape=_DECODE.get(ch),
        encode_escape=_ENCODE.get(ch),
        integer=integer,
    )


_TABLE = tuple(_build_info(chr(code)) for code in range(256))


def _to_char(c: CharLike) -> str:
    if isinstance(c, int):
        if c < 0 or c > 0x10FFFF:
            raise ValueError(f"invalid character code {c}")
        return chr(c)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise ValueError(f"expected a single character, got {c!r}")


def char_info(c: CharLike) -> CharInfo:
    """Return the table entry for a character or character code."""
    ch = _to_char(c)
    code = ord(ch)
    if code < len(_TABLE):
        return _TABLE[code]
    return CharInfo(flags=CharFlag.NONE, upper=ch, lower=ch)


def is_whitespace(c: CharLike) -> bool:
    return bool(char_info(c).flags & CharFlag.WHITESPACE)


def is_symbol(c: CharLike) -> bool:
    return bool(char_info(c).flags & CharFlag.SYMBOL)


def is_digit(c: CharLike) -> bool:
    return bool(char_info(c).flags & CharFlag.DIGIT)


def is_hex_digit(c: CharLike) -> bool:
    return bool(char_info(c).flags & CharFlag.HEX_DIGIT)


def is_letter(c: CharLike) -> bool:
    return bool(char_info(c).flags & CharFlag.LETTER)


def to_lower(c: CharLike) -> str:
    return char_info(c).lower


def to_upper(c: CharLike) -> str:
    return char_info(c).upper


def digit_value(c: CharLike) -> Optional[int]:
    """Value of a hexadecimal digit, or None for other characters."""
    return char_info(c).integer


def decode_escape(c: CharLike) -> Optional[str]:
    """Character that a backslash followed by ``c`` stands for, if any."""
    return char_info(c).decode_escape


def encode_escape(c: CharLike) -> Optional[str]:
    """Letter that escapes ``c`` after a backslash, if any."""
    return char_info(c).encode_escape