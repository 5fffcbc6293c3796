"""Value types exchanged between enumeration, planning and consumers."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FileStatus:
    """A file to plan: its path, size in bytes, and whether it is a regular file."""

    path: Path
    size: int
    is_file: bool


@dataclass(frozen=True, slots=True)
class SplitDescriptor:
    """Byte range [offset, offset + length) of one file."""

    path: Path
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True, slots=True)
class SplitState:
    """Fold state threaded through the lines of one file."""

    begin: int = 0
    accumulated_length: int = 0
    line_count: int = 0
