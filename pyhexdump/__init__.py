"""Little-endian hex dumps of files, sixteen bytes per line."""

from importlib import metadata

from .args import InvocationArgs, parse_args
from .errors import HexdumpError, InvalidLengthError, UsageError
from .formatter import format_line, hexdump, iter_lines, parse_dump, write_dump
from .reader import read_bounded, read_file


def _installed_version() -> str:
    try:
        return metadata.version("pyhexdump")
    except metadata.PackageNotFoundError:
        # running from a source tree that was never installed
        return "0.0.0"


__version__ = _installed_version()

__all__ = [
    "format_line",
    "hexdump",
    "HexdumpError",
    "InvalidLengthError",
    "InvocationArgs",
    "iter_lines",
    "parse_args",
    "parse_dump",
    "read_bounded",
    "read_file",
    "UsageError",
    "write_dump",
    "__version__",
]
