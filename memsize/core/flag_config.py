from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .int_types import IntType


@dataclass
class FlagSetting:
    name: str
    type_name: str
    int_type: IntType
    raw: str


@dataclass
class FlagsConfig:
    flags_file: Path
    word_bits: int
    settings: list[FlagSetting]
