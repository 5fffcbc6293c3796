"""Read the logical lines that fall inside one split."""

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import BinaryIO

from csv_split_planner.config import SplitConfig
from csv_split_planner.planner.types import SplitDescriptor
from csv_split_planner.reader.line_reader import QuoteAwareLineReader
from csv_split_planner.reader.stream import BoundedStream, open_stream
from csv_split_planner.reader.types import LogicalLine


def iter_split_lines(
    split: SplitDescriptor,
    config: SplitConfig,
    opener: Callable[[str | Path], BinaryIO] = open_stream,
) -> Iterator[LogicalLine]:
    """
    Yield the logical lines contained in [offset, offset + length).

    Nothing outside the range is read, so a split produced by the planner
    yields exactly the lines it was planned with.
    """
    with opener(split.path) as stream:
        stream.seek(split.offset)
        reader = QuoteAwareLineReader.from_config(BoundedStream(stream, split.length), config)
        yield from reader
