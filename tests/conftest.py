from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from memsize.core.flag_config import FlagSetting, FlagsConfig
from memsize.core.int_types import INT64, UINT32, UINT64

FlagsFileWriter = Callable[[list[str]], Path]


@pytest.fixture
def write_flags_file(tmp_path: Path) -> FlagsFileWriter:
    def _write(lines: list[str]) -> Path:
        flags_file = tmp_path / "memory.flags"
        flags_file.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return flags_file

    return _write


@pytest.fixture
def sample_config(tmp_path: Path) -> FlagsConfig:
    return FlagsConfig(
        flags_file=tmp_path / "memory.flags",
        word_bits=64,
        settings=[
            FlagSetting(name="MaxHeapSize", type_name="size_t", int_type=UINT64, raw="4G"),
            FlagSetting(name="ThreadStackSize", type_name="intx", int_type=INT64, raw="1M"),
            FlagSetting(name="CICompilerCount", type_name="uint", int_type=UINT32, raw="0x10"),
        ],
    )
