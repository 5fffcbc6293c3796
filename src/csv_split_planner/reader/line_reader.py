"""Quote-aware logical line reader."""

from collections.abc import Iterator
from typing import BinaryIO, Self

from csv_split_planner.config import SplitConfig
from csv_split_planner.errors import ConfigurationError
from csv_split_planner.reader.types import NEWLINE, LogicalLine


class QuoteAwareLineReader:
    """
    Read logical lines from a binary stream.

    A logical line ends at a newline seen outside a quoted region. Every
    delimiter byte toggles the quoted state, so a doubled delimiter simply
    opens and closes again; there is no escape handling beyond that.

    The reader owns the stream and closes it when used as a context manager.
    """

    def __init__(self, stream: BinaryIO, delimiter: bytes = b'"', separator: bytes = b","):
        if not delimiter or not separator:
            raise ConfigurationError("missing parameter delimiter/separator")
        if delimiter == separator:
            raise ConfigurationError("delimiter and separator cannot be the same character")
        if NEWLINE in delimiter or NEWLINE in separator:
            raise ConfigurationError("delimiter/separator cannot be a newline")
        self._stream = stream
        self._delimiter = delimiter
        self._separator = separator

    @classmethod
    def from_config(cls, stream: BinaryIO, config: SplitConfig) -> Self:
        return cls(stream, config.delimiter_bytes, config.separator_bytes)

    @property
    def separator(self) -> bytes:
        return self._separator

    def read_line(self, buffer: bytearray) -> int:
        """
        Replace the contents of buffer with the next logical line.

        Returns the number of bytes consumed, including the terminating
        newline, or 0 at end of stream. An unterminated quoted field runs to
        end of stream and is returned as the last line.
        """
        buffer.clear()
        quoted = False

        while True:
            # readline() stops right after a raw newline, so the stream never
            # advances past the end of the logical line.
            chunk = self._stream.readline()
            if not chunk:
                break

            buffer += chunk
            if chunk.count(self._delimiter) % 2:
                quoted = not quoted

            if not quoted or not chunk.endswith(NEWLINE):
                break

        return len(buffer)

    def __iter__(self) -> Iterator[LogicalLine]:
        buffer = bytearray()
        while (size := self.read_line(buffer)) > 0:
            yield LogicalLine(bytes(buffer), size)

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
