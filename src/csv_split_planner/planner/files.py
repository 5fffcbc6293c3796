"""Default input enumeration."""

import os
from collections.abc import Iterable
from pathlib import Path

from csv_split_planner.errors import InputError
from csv_split_planner.planner.types import FileStatus

# Names starting with these are skipped when listing a directory.
HIDDEN_PREFIXES = ("_", ".")


def stat_file(path: str | Path) -> FileStatus:
    """Describe one path without opening it."""
    path = Path(path)
    if not os.path.lexists(path):
        raise InputError(f"Input path does not exist: {path}")

    # Path.is_file() follows symlinks, so a dangling link is not a file.
    if path.is_file():
        return FileStatus(path=path, size=path.stat().st_size, is_file=True)
    return FileStatus(path=path, size=0, is_file=False)


def list_input_files(paths: Iterable[str | Path]) -> list[FileStatus]:
    """
    Expand input paths into the ordered list of files to plan.

    Directories contribute their non-hidden children, sorted by name. The
    listing is not recursive: a nested directory is returned as a non-file
    entry and rejected later by the planner.
    """
    statuses: list[FileStatus] = []
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_dir():
            children = sorted(
                child for child in path.iterdir() if not child.name.startswith(HIDDEN_PREFIXES)
            )
            statuses.extend(stat_file(child) for child in children)
        else:
            statuses.append(stat_file(path))
    return statuses
