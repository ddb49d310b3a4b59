# pyhexdump/reader.py

from __future__ import annotations

import os
from typing import BinaryIO

READ_CHUNK_SIZE = 64 * 1024


def read_bounded(stream: BinaryIO, limit: int | None = None, chunk_size: int = READ_CHUNK_SIZE) -> bytes:
    """
    Reads from a binary stream until EOF, or until `limit` bytes have been
    collected when a limit is given.

    A read that returns fewer bytes than requested is not treated as EOF;
    only an empty read is. Stopping short of the limit because the stream
    ran out is not an error.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    buffer = bytearray()
    while limit is None or len(buffer) < limit:
        want = chunk_size if limit is None else min(chunk_size, limit - len(buffer))
        chunk = stream.read(want)
        if not chunk:
            break
        buffer += chunk
    return bytes(buffer)


def read_file(path: str | os.PathLike, limit: int | None = None) -> bytes:
    """Reads the whole file at `path`, or its first `limit` bytes."""
    with open(path, 'rb') as f:
        return read_bounded(f, limit)
