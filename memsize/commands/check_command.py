from __future__ import annotations

import sys

from ..core.flag_config import FlagsConfig
from ..core.size_parser import parse_memory_size
from .base import Command


class CheckCommand(Command):
    def __init__(self, config: FlagsConfig) -> None:
        self._config = config

    def run(self) -> int:
        print(f"Checking {self._config.flags_file} ({self._config.word_bits}-bit)")

        failures: list[str] = []
        for setting in self._config.settings:
            value = parse_memory_size(setting.raw, setting.int_type)
            if value is None:
                failures.append(
                    f"{setting.name}: invalid {setting.type_name} "
                    f"({setting.int_type.name}) value: {setting.raw!r}"
                )
                continue
            print(f"{setting.name} = {value} ({setting.type_name})")

        if failures:
            for line in failures:
                print(line, file=sys.stderr)
            print(
                f"{len(failures)} of {len(self._config.settings)} flags invalid",
                file=sys.stderr,
            )
            return 1

        print(f"All {len(self._config.settings)} flags valid")
        return 0
