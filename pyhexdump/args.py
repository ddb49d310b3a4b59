# pyhexdump/args.py

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import NoReturn, Sequence

from .errors import InvalidLengthError, UsageError

PROG = "hexdump"
USAGE = f"{PROG} [-n LEN] FILE"


@dataclass(frozen=True)
class InvocationArgs:
    file_path: str
    byte_limit: int | None = None


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _byte_limit(value: str) -> int:
    # int() alone would also take "+5", " 5" and "1_000"
    if not value.isascii() or not value.isdigit():
        raise InvalidLengthError(value)
    return int(value)


def build_parser() -> argparse.ArgumentParser:
    from . import __version__

    parser = _RaisingArgumentParser(
        prog=PROG,
        usage=USAGE,
        allow_abbrev=False,
        description=(
            "Print FILE as a little-endian hex dump: sixteen bytes per line, "
            "grouped as two-byte words with the low byte first."
        ),
    )
    parser.add_argument(
        "file",
        metavar="FILE",
        help="Path to the file to dump.",
    )
    parser.add_argument(
        "-n",
        dest="length",
        metavar="LEN",
        action="append",
        default=None,
        help="Dump at most LEN bytes from the start of FILE.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: Sequence[str]) -> InvocationArgs:
    """
    Turn the argument list (without the program name) into InvocationArgs.

    Raises InvalidLengthError when the ``-n`` value is not a non-negative
    integer, and UsageError for every other malformed command line.
    """
    namespace = build_parser().parse_args(list(argv))
    limit = None
    if namespace.length is not None:
        if len(namespace.length) > 1:
            raise UsageError("argument -n: given more than once")
        limit = _byte_limit(namespace.length[0])
    return InvocationArgs(file_path=namespace.file, byte_limit=limit)
