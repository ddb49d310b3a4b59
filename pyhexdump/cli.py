#!/usr/bin/env python3
"""
Command-line entry point: print a file as a little-endian hex dump.

    hexdump [-n LEN] FILE
"""

from __future__ import annotations

import sys
from typing import Sequence

from .args import USAGE, parse_args
from .errors import InvalidLengthError, UsageError
from .formatter import write_dump
from .reader import read_file


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(argv)
    except InvalidLengthError as exc:
        print(f"Error: {exc}: {exc.value!r}", file=sys.stderr)
        return 1
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Usage: {USAGE}", file=sys.stderr)
        return 1

    # Everything is read before the first line is printed, so a failed
    # read never leaves a partial dump on stdout.
    try:
        data = read_file(args.file_path, args.byte_limit)
    except OSError as exc:
        print(f"Error: cannot read {args.file_path}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    write_dump(data, sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
