"""Split planning for delimited text files."""

from csv_split_planner.planner.files import list_input_files, stat_file
from csv_split_planner.planner.plan import iter_splits, plan_splits
from csv_split_planner.planner.types import FileStatus, SplitDescriptor

__all__ = [
    "FileStatus",
    "SplitDescriptor",
    "iter_splits",
    "list_input_files",
    "plan_splits",
    "stat_file",
]
