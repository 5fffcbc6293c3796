"""Command-line interface for the CSV split planner."""

import argparse
import logging
import sys

from csv_split_planner.config import (
    DEFAULT_DELIMITER,
    DEFAULT_LINES_PER_MAP,
    DEFAULT_SEPARATOR,
    SplitConfig,
)
from csv_split_planner.errors import ConfigurationError, InputError
from csv_split_planner.job import plan_job

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="csv-split-planner",
        description="Cut delimited text files into byte ranges of N logical lines each.",
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        help="Input files or directories (directories contribute their non-hidden files)",
    )

    parser.add_argument(
        "--lines-per-split",
        "-n",
        type=int,
        default=DEFAULT_LINES_PER_MAP,
        help=f"Logical lines per split (default: {DEFAULT_LINES_PER_MAP})",
    )

    parser.add_argument(
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help=f"Quote character (default: {DEFAULT_DELIMITER})",
    )

    parser.add_argument(
        "--separator",
        default=DEFAULT_SEPARATOR,
        help=f"Field separator (default: {DEFAULT_SEPARATOR})",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of parallel planning workers (default: auto)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    try:
        config = SplitConfig(
            delimiter=args.delimiter,
            separator=args.separator,
            lines_per_split=args.lines_per_split,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    if args.workers is not None and args.workers < 1:
        parser.error(f"--workers must be positive, got {args.workers}")

    try:
        splits = plan_job(args.inputs, config, workers=args.workers)
    except (InputError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    for split in splits:
        print(f"{split.path},{split.offset},{split.length}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
