"""Logical-line reading over binary streams."""

from csv_split_planner.reader.line_reader import QuoteAwareLineReader
from csv_split_planner.reader.stream import BoundedStream, open_stream
from csv_split_planner.reader.types import BUFFER_SIZE, LogicalLine

__all__ = [
    "BUFFER_SIZE",
    "BoundedStream",
    "LogicalLine",
    "QuoteAwareLineReader",
    "open_stream",
]
