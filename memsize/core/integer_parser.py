from __future__ import annotations

import string
from typing import NamedTuple

from .int_types import IntType

_WHITESPACE = " \t\n\v\f\r"


class ParsedInteger(NamedTuple):
    value: int
    end: int


def _digit_value(char: str, base: int) -> int | None:
    if char in string.digits:
        digit = ord(char) - ord("0")
    elif char in string.ascii_letters:
        digit = ord(char.lower()) - ord("a") + 10
    else:
        return None
    return digit if digit < base else None


def parse_integer_prefix(text: str, base: int, int_type: IntType) -> ParsedInteger | None:
    """Read the integer at the start of ``text`` the way strtoll/strtoull do.

    Leading whitespace and a single sign are accepted, and in base 16 a
    ``0x`` prefix is skipped when a hex digit follows it. ``end`` is the
    index of the first character that is not part of the number, or 0 when
    no digits were found.

    Returns None when the number does not fit ``int_type``. Unsigned types
    refuse any minus sign instead of wrapping the negated value.
    """
    if base not in (10, 16):
        raise ValueError(f"Unsupported radix: {base}")

    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1

    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    if negative and not int_type.signed:
        return None

    if (
        base == 16
        and text[pos:pos + 2] in ("0x", "0X")
        and pos + 2 < length
        and _digit_value(text[pos + 2], 16) is not None
    ):
        pos += 2

    start = pos
    magnitude = 0
    while pos < length:
        digit = _digit_value(text[pos], base)
        if digit is None:
            break
        magnitude = magnitude * base + digit
        pos += 1

    if pos == start:
        return ParsedInteger(0, 0)

    value = -magnitude if negative else magnitude
    if not int_type.contains(value):
        return None
    return ParsedInteger(value, pos)
