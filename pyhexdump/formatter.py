# pyhexdump/formatter.py

from __future__ import annotations

import re
import struct
from typing import Iterator, TextIO

BYTES_PER_LINE = 16
OFFSET_WIDTH = 8

_LINE_RE = re.compile(r'^([0-9a-fA-F]{8})((?: [0-9a-fA-F]+)*)$')


def _read_word(data: bytes, pos: int) -> int:
    """Little-endian 16-bit word at `pos`: the first byte is the low byte."""
    return struct.unpack('<H', data[pos:pos + 2])[0]


def format_line(offset: int, chunk: bytes) -> str:
    """
    Renders one line of the dump.

    Every pair of bytes becomes a 4-digit word, low byte first, so
    ``00 01`` prints as ``0100``. A trailing byte without a partner prints
    as 2 digits on its own.
    """
    groups = [f"{offset:0{OFFSET_WIDTH}x}"]
    pos = 0
    while pos + 1 < len(chunk):
        groups.append(f"{_read_word(chunk, pos):04x}")
        pos += 2
    if pos < len(chunk):
        groups.append(f"{chunk[pos]:02x}")
    return " ".join(groups)


def iter_lines(data: bytes) -> Iterator[str]:
    for offset in range(0, len(data), BYTES_PER_LINE):
        yield format_line(offset, data[offset:offset + BYTES_PER_LINE])


def hexdump(data: bytes) -> str:
    """Returns the full dump of `data`, one newline-terminated line per 16 bytes."""
    return "".join(f"{line}\n" for line in iter_lines(data))


def write_dump(data: bytes, out: TextIO) -> int:
    """Writes the dump of `data` to `out` and returns the number of lines written."""
    count = 0
    for line in iter_lines(data):
        out.write(line)
        out.write("\n")
        count += 1
    return count


def parse_dump(text: str) -> bytes:
    """
    Reads a dump produced by `hexdump` back into the original bytes.

    Raises ValueError when a line is malformed or its offset does not
    match the number of bytes decoded so far.
    """
    data = bytearray()
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        match = _LINE_RE.match(line)
        if not match:
            raise ValueError(f"line {lineno}: not a dump line: {line!r}")

        offset = int(match.group(1), 16)
        if offset != len(data):
            raise ValueError(f"line {lineno}: expected offset {len(data):08x}, got {offset:08x}")

        for group in match.group(2).split():
            if len(group) == 4:
                data += struct.pack('<H', int(group, 16))
            elif len(group) == 2:
                data.append(int(group, 16))
            else:
                raise ValueError(f"line {lineno}: bad group {group!r}")
    return bytes(data)
