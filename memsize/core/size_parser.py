from __future__ import annotations

from .int_types import UINT64, IntType
from .integer_parser import parse_integer_prefix

_SUFFIX_EXPONENTS = {
    "K": 1,
    "M": 2,
    "G": 3,
    "T": 4,
}


def multiply_by_1k(n: int, int_type: IntType) -> int | None:
    # Supported minimums are multiples of 1024, so floor division is exact.
    if int_type.min_value // 1024 <= n <= int_type.max_value // 1024:
        return n * 1024
    return None


def _is_hex(value: str) -> bool:
    def at(index: int) -> str:
        return value[index] if index < len(value) else ""

    # The negative form checks 'x' at offset 2 but 'X' at offset 3, so
    # "-0X10" is read as decimal and rejected.
    return (at(0) == "0" and at(1) in ("x", "X")) or (
        at(0) == "-" and at(1) == "0" and (at(2) == "x" or at(3) == "X")
    )


def parse_memory_size(value: str, int_type: IntType) -> int | None:
    """Parse a size such as ``64M`` or ``0x10K`` into an integer of ``int_type``.

    A single trailing K, M, G or T (any case) multiplies the number by the
    matching power of 1024. Returns None for malformed input or when the
    result does not fit ``int_type``.
    """
    if not value or not (value[0] in "0123456789" or value[0] == "-"):
        # The integer parser skips leading whitespace; sizes may not.
        return None

    parsed = parse_integer_prefix(value, 16 if _is_hex(value) else 10, int_type)
    if parsed is None:
        return None

    remainder = value[parsed.end:]
    if parsed.end == 0 or len(remainder) > 1:
        return None

    n = parsed.value
    if not remainder:
        return n

    exponent = _SUFFIX_EXPONENTS.get(remainder.upper())
    if exponent is None:
        return None
    for _ in range(exponent):
        scaled = multiply_by_1k(n, int_type)
        if scaled is None:
            return None
        n = scaled
    return n


class SizeParser:
    @classmethod
    def parse(cls, value: str, int_type: IntType = UINT64) -> int:
        result = parse_memory_size(value, int_type)
        if result is None:
            raise SystemExit(f"Invalid memory size for {int_type.name}: {value}")
        return result
