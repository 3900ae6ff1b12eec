#!/usr/bin/env python3

from __future__ import annotations

import argparse
import re
import sys

from .commands.factory import CommandFactory


# argparse only treats plain negative integers as values; "-5K" or "-0x10"
# would otherwise be read as an unknown option.
_NEGATIVE_SIZE = re.compile(r"^-\d")


class CliApplication:
    def __init__(self) -> None:
        self._factory = CommandFactory()

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="memsize",
            description="Parse memory-size flag values such as 512M or 0x10K",
        )
        parser.add_argument("action", choices=["parse", "check"])
        parser.add_argument(
            "target",
            help="Size value for 'parse' (negative values are accepted, or may "
            "follow '--'), flags file for 'check'",
        )
        parser.add_argument(
            "--type",
            dest="type_name",
            default="uint64",
            help="Integer type for 'parse' (int32, uint32, int64, uint64, "
            "int, uint, intx, uintx, uint64_t, size_t; default: uint64)",
        )
        parser.add_argument(
            "--word-bits",
            type=int,
            choices=[32, 64],
            default=64,
            help="Platform word size used for intx, uintx and size_t (default: 64)",
        )
        return parser

    def run(self, argv: list[str] | None = None) -> int:
        args = self.build_parser().parse_args(
            self._isolate_negative_size(sys.argv[1:] if argv is None else argv)
        )
        command = self._factory.create(
            args.action,
            args.target,
            type_name=args.type_name,
            word_bits=args.word_bits,
        )
        return command.run()

    def _isolate_negative_size(self, argv: list[str]) -> list[str]:
        if "--" in argv:
            return list(argv)
        for index, token in enumerate(argv):
            if _NEGATIVE_SIZE.match(token):
                return [*argv[:index], *argv[index + 1:], "--", token]
        return list(argv)


def main() -> int:
    app = CliApplication()
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
