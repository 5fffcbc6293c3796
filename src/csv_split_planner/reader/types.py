"""Shared constants and value types for logical-line reading."""

from dataclasses import dataclass

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

NEWLINE = b"\n"


@dataclass(frozen=True, slots=True)
class LogicalLine:
    """One record as read from the stream, terminator included."""

    content: bytes
    byte_length: int
