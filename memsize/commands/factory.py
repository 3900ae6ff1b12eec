from __future__ import annotations

from ..core.config_loader import ConfigLoader
from ..core.int_types import resolve_int_type
from ..core.protocols import FlagsLoaderProtocol
from .base import Command
from .check_command import CheckCommand
from .parse_command import ParseCommand


class CommandFactory:
    def __init__(
        self,
        *,
        config_loader: FlagsLoaderProtocol | None = None,
    ) -> None:
        self._config_loader = config_loader or ConfigLoader()

    def create(
        self,
        action: str,
        target: str,
        *,
        type_name: str = "uint64",
        word_bits: int = 64,
    ) -> Command:
        if action == "parse":
            return ParseCommand(target, resolve_int_type(type_name, word_bits))
        if action == "check":
            config = self._config_loader.load(target, word_bits)
            return CheckCommand(config)
        raise SystemExit(f"Unsupported action: {action}")
