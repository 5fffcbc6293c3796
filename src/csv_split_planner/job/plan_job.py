"""Plan splits for every file of a job."""

import logging
import os
import time
from collections.abc import Iterable
from functools import partial
from pathlib import Path

from csv_split_planner.config import SplitConfig
from csv_split_planner.errors import InputError
from csv_split_planner.job.execution import (
    CSV_SPLIT_EXECUTOR_ENV,
    describe_executor,
    get_executor_class,
    is_gil_enabled,
)
from csv_split_planner.planner.files import list_input_files
from csv_split_planner.planner.plan import StreamOpener, plan_splits
from csv_split_planner.planner.types import FileStatus, SplitDescriptor
from csv_split_planner.reader.stream import open_stream

logger = logging.getLogger(__name__)

# Each process receives 4 files to plan.
PROCESS_POOL_CHUNKSIZE = 4


def plan_files(
    files: Iterable[FileStatus],
    config: SplitConfig,
    workers: int | None = None,
    opener: StreamOpener = open_stream,
) -> list[SplitDescriptor]:
    """
    Plan already-enumerated files and concatenate their splits.

    Splits stay grouped by file, in the order the files were given, whichever
    executor runs the per-file passes. Any failing file aborts the whole run.
    """
    config.validate()
    files = list(files)

    # A non-file fails the run before any file is read.
    for status in files:
        if not status.is_file:
            raise InputError(f"Not a file: {status.path}")

    executor_class = get_executor_class(opener)
    plan_one = partial(plan_splits, config=config, opener=opener)

    splits: list[SplitDescriptor] = []

    def collect(results) -> None:
        """Append each file's splits in input order."""
        for status, file_splits in zip(files, results, strict=True):
            logger.debug(
                "Planned %s: %d bytes, %d splits", status.path, status.size, len(file_splits)
            )
            splits.extend(file_splits)

    if executor_class is None or len(files) <= 1:
        collect(plan_one(status) for status in files)
    else:
        with executor_class(max_workers=workers) as executor:
            if describe_executor(executor_class) == "processes":
                results = executor.map(plan_one, files, chunksize=PROCESS_POOL_CHUNKSIZE)
            else:
                results = executor.map(plan_one, files)
            collect(results)

    return splits


def plan_job(
    paths: Iterable[str | Path],
    config: SplitConfig,
    workers: int | None = None,
    opener: StreamOpener = open_stream,
) -> list[SplitDescriptor]:
    """
    Enumerate the input paths and plan splits for every file found.

    Configuration is checked before the inputs are listed.
    """
    total_start = time.perf_counter()
    config.validate()

    files = list_input_files(paths)
    total_bytes = sum(status.size for status in files)

    executor_class = get_executor_class(opener)
    executor_name = describe_executor(executor_class)
    gil_status = "enabled" if is_gil_enabled() else "disabled"
    workers_desc = "auto" if workers is None else str(workers)
    executor_override = os.environ.get(CSV_SPLIT_EXECUTOR_ENV, "")
    override_info = f", {CSV_SPLIT_EXECUTOR_ENV}={executor_override}" if executor_override else ""

    logger.info(
        f"Starting: files={len(files)}, bytes={total_bytes}, "
        f"lines_per_split={config.lines_per_split}, workers={workers_desc}, "
        f"executor={executor_name}, GIL={gil_status}{override_info}"
    )

    splits = plan_files(files, config, workers=workers, opener=opener)

    total_time = time.perf_counter() - total_start
    logger.info(
        "Result: %d splits from %d files (total %.2fs)", len(splits), len(files), total_time
    )
    return splits
