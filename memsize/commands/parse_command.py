from __future__ import annotations

from ..core.int_types import IntType
from ..core.size_parser import SizeParser
from .base import Command


class ParseCommand(Command):
    def __init__(self, value: str, int_type: IntType) -> None:
        self._value = value
        self._int_type = int_type

    def run(self) -> int:
        print(SizeParser.parse(self._value, self._int_type))
        return 0
