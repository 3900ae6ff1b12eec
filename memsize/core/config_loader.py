from __future__ import annotations

import os
from pathlib import Path

from .flag_config import FlagSetting, FlagsConfig
from .int_types import resolve_int_type

DEFAULT_FLAG_TYPES: dict[str, str] = {
    "MaxHeapSize": "size_t",
    "InitialHeapSize": "size_t",
    "MinHeapSize": "size_t",
    "MaxNewSize": "size_t",
    "MaxMetaspaceSize": "size_t",
    "ReservedCodeCacheSize": "uintx",
    "ThreadStackSize": "intx",
    "MaxDirectMemorySize": "uint64_t",
}


class ConfigLoader:
    def __init__(self, flag_types: dict[str, str] | None = None) -> None:
        self._flag_types = DEFAULT_FLAG_TYPES if flag_types is None else flag_types

    def load(self, flags_path: str, word_bits: int = 64) -> FlagsConfig:
        flags_file = Path(flags_path).expanduser()
        if not flags_file.is_file():
            raise SystemExit(f"Missing flags file: {flags_file}")

        settings = [
            self._build_setting(key, raw, word_bits)
            for key, raw in self._parse_flags_file(flags_file)
        ]
        if not settings:
            raise SystemExit(f"No flags found in: {flags_file}")

        return FlagsConfig(
            flags_file=flags_file,
            word_bits=word_bits,
            settings=settings,
        )

    def _parse_flags_file(self, flags_file: Path) -> list[tuple[str, str]]:
        entries: list[tuple[str, str]] = []
        for raw_line in flags_file.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            cleaned = value.strip().strip('"').strip("'")
            entries.append((key.strip(), os.path.expandvars(cleaned)))
        return entries

    def _build_setting(self, key: str, raw: str, word_bits: int) -> FlagSetting:
        if ":" in key:
            name, type_name = (part.strip() for part in key.split(":", 1))
        else:
            name = key
            type_name = self._flag_types.get(name, "")
            if not type_name:
                raise SystemExit(f"Unknown flag without type: {name}")

        return FlagSetting(
            name=name,
            type_name=type_name,
            int_type=resolve_int_type(type_name, word_bits),
            raw=raw,
        )
