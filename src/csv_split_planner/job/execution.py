"""Choosing how the per-file planning passes of a job are run."""

import os
import pickle
import sys
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import TypeAlias

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# Environment variable to override executor selection.
CSV_SPLIT_EXECUTOR_ENV = "CSV_SPLIT_EXECUTOR"


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def can_send_to_process(opener: Callable) -> bool:
    """Whether the stream provider survives pickling into a worker process."""
    try:
        pickle.dumps(opener)
    except (pickle.PicklingError, AttributeError, TypeError):
        return False
    return True


def get_executor_class(opener: Callable | None = None) -> ExecutorClass:
    """
    Select the executor used to plan several files at once.

    Planning is bound by reads, so threads are the default. Processes are
    only used when CSV_SPLIT_EXECUTOR=processes asks for them and the opener
    can be pickled; a lambda or local opener keeps the work in threads.
    CSV_SPLIT_EXECUTOR=serial plans files one after another in the caller.
    """
    executor_override = os.environ.get(CSV_SPLIT_EXECUTOR_ENV, "").lower()

    if executor_override == "serial":
        return None
    if executor_override == "processes" and (opener is None or can_send_to_process(opener)):
        return ProcessPoolExecutor
    return ThreadPoolExecutor


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    if executor_class is ThreadPoolExecutor:
        return "threads"
    return "processes"
