from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntType:
    name: str
    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            raise ValueError(f"Unsupported integer width: {self.bits}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


INT32 = IntType("int32", 32, True)
UINT32 = IntType("uint32", 32, False)
INT64 = IntType("int64", 64, True)
UINT64 = IntType("uint64", 64, False)

INT_TYPES: dict[str, IntType] = {
    int_type.name: int_type for int_type in (INT32, UINT32, INT64, UINT64)
}

# Option types as seen by a flag declaration. Word-sized aliases assume a
# 64-bit platform here; resolve_int_type() narrows them for 32-bit words.
FLAG_TYPE_ALIASES: dict[str, IntType] = {
    "int": INT32,
    "uint": UINT32,
    "intx": INT64,
    "uintx": UINT64,
    "uint64_t": UINT64,
    "size_t": UINT64,
}

_NARROW_WORD_ALIASES: dict[str, IntType] = {
    "intx": INT32,
    "uintx": UINT32,
    "size_t": UINT32,
}


def resolve_int_type(name: str, word_bits: int = 64) -> IntType:
    if word_bits not in (32, 64):
        raise SystemExit(f"Unsupported word size: {word_bits}")

    key = name.strip()
    if key in INT_TYPES:
        return INT_TYPES[key]
    if word_bits == 32 and key in _NARROW_WORD_ALIASES:
        return _NARROW_WORD_ALIASES[key]
    if key in FLAG_TYPE_ALIASES:
        return FLAG_TYPE_ALIASES[key]
    raise SystemExit(f"Unknown integer type: {name}")
