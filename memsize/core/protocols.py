from __future__ import annotations

from typing import Protocol

from .flag_config import FlagsConfig


class FlagsLoaderProtocol(Protocol):
    def load(self, flags_path: str, word_bits: int = 64) -> FlagsConfig:
        ...
