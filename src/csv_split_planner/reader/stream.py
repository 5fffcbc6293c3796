"""Default stream provider and range-limited streams."""

from pathlib import Path
from typing import BinaryIO

from csv_split_planner.reader.types import BUFFER_SIZE


def open_stream(path: str | Path) -> BinaryIO:
    """Open a file for sequential binary reading from offset 0."""
    return open(path, "rb", buffering=BUFFER_SIZE)  # noqa: SIM115


class BoundedStream:
    """
    Read-only view of at most `length` bytes of another stream.

    Only the calls the line reader makes are supported. Closing the view
    closes the wrapped stream.
    """

    def __init__(self, stream: BinaryIO, length: int):
        self._stream = stream
        self._remaining = length

    def readline(self, size: int = -1) -> bytes:
        if self._remaining <= 0:
            return b""
        limit = self._remaining if size < 0 else min(size, self._remaining)
        data = self._stream.readline(limit)
        self._remaining -= len(data)
        return data

    def read(self, size: int = -1) -> bytes:
        if self._remaining <= 0:
            return b""
        limit = self._remaining if size < 0 else min(size, self._remaining)
        data = self._stream.read(limit)
        self._remaining -= len(data)
        return data

    def close(self) -> None:
        self._stream.close()
