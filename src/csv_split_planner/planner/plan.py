"""Split planning: group a file's logical lines into fixed-count byte ranges."""

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import BinaryIO, TypeAlias

from csv_split_planner.config import SplitConfig
from csv_split_planner.errors import InputError
from csv_split_planner.planner.types import FileStatus, SplitDescriptor, SplitState
from csv_split_planner.reader.line_reader import QuoteAwareLineReader
from csv_split_planner.reader.stream import open_stream

StreamOpener: TypeAlias = Callable[[str | Path], BinaryIO]


def advance(
    state: SplitState,
    line_length: int,
    lines_per_split: int,
) -> tuple[SplitState, tuple[int, int] | None]:
    """
    Account for one logical line.

    Returns the next state and, when the line completes a group, the
    (offset, length) of the finished split.
    """
    length = state.accumulated_length + line_length
    count = state.line_count + 1
    if count == lines_per_split:
        return SplitState(begin=state.begin + length), (state.begin, length)
    return SplitState(state.begin, length, count), None


def fold_line_lengths(
    path: Path,
    line_lengths: Iterable[int],
    lines_per_split: int,
) -> Iterator[SplitDescriptor]:
    """Turn a sequence of logical line lengths into split descriptors."""
    state = SplitState()
    for line_length in line_lengths:
        state, finished = advance(state, line_length, lines_per_split)
        if finished is not None:
            yield SplitDescriptor(path, *finished)

    # Trailing partial group.
    if state.line_count > 0:
        yield SplitDescriptor(path, state.begin, state.accumulated_length)


def _read_file_splits(
    path: Path,
    config: SplitConfig,
    opener: StreamOpener,
) -> Iterator[SplitDescriptor]:
    with opener(path) as stream, QuoteAwareLineReader.from_config(stream, config) as reader:
        lengths = (line.byte_length for line in reader)
        yield from fold_line_lengths(path, lengths, config.lines_per_split)


def iter_splits(
    file: FileStatus,
    config: SplitConfig,
    opener: StreamOpener = open_stream,
) -> Iterator[SplitDescriptor]:
    """
    Lazily plan the splits of one file.

    Configuration and input checks run immediately; the file is opened on
    first iteration and stays open until the iterator is exhausted or closed.
    """
    config.validate()
    if not file.is_file:
        raise InputError(f"Not a file: {file.path}")
    return _read_file_splits(file.path, config, opener)


def plan_splits(
    file: FileStatus,
    config: SplitConfig,
    opener: StreamOpener = open_stream,
) -> list[SplitDescriptor]:
    """
    Plan the splits of one file, each holding `lines_per_split` logical lines.

    The last split may hold fewer lines. An empty file yields no splits.
    Configuration and input errors are raised before the file is opened;
    read errors propagate after the stream has been closed.
    """
    return list(iter_splits(file, config, opener))
