"""Shared pytest fixtures for the pyhexdump tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def sequential_data() -> bytes:
    """Forty bytes 0x00..0x27: two full lines and a half line."""
    return bytes(range(40))


@pytest.fixture()
def sample_file(tmp_path: Path, sequential_data: bytes) -> Path:
    path = tmp_path / "sample.bin"
    path.write_bytes(sequential_data)
    return path


@pytest.fixture()
def empty_file(tmp_path: Path) -> Path:
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path


class ShortReadStream:
    """Binary stream that hands out at most `step` bytes per read() call."""

    def __init__(self, data: bytes, step: int = 3):
        self._data = data
        self._pos = 0
        self.step = step
        self.calls = 0

    def read(self, size: int = -1) -> bytes:
        self.calls += 1
        if size < 0:
            size = len(self._data)
        n = min(size, self.step)
        chunk = self._data[self._pos:self._pos + n]
        self._pos += len(chunk)
        return chunk


@pytest.fixture()
def short_read_stream():
    return ShortReadStream
