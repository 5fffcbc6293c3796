"""CSV Split Planner - cut delimited files into fixed line-count byte ranges."""

from csv_split_planner.config import SplitConfig
from csv_split_planner.errors import ConfigurationError, InputError, SplitPlannerError
from csv_split_planner.job import plan_job
from csv_split_planner.planner import FileStatus, SplitDescriptor, plan_splits
from csv_split_planner.reader import LogicalLine, QuoteAwareLineReader

__all__ = [
    "ConfigurationError",
    "FileStatus",
    "InputError",
    "LogicalLine",
    "QuoteAwareLineReader",
    "SplitConfig",
    "SplitDescriptor",
    "SplitPlannerError",
    "plan_job",
    "plan_splits",
]
