"""Tests for the synthetic CSV generator, checked against the planner."""

from pathlib import Path

from csv_split_planner import SplitConfig, plan_splits
from csv_split_planner.planner import stat_file
from generate_synthetic_csv import generate_synthetic_csv


def test_planner_counts_generated_records(tmp_path: Path) -> None:
    path = tmp_path / "synthetic.csv"
    records, raw_newlines = generate_synthetic_csv(
        output_path=str(path), rows=500, multiline_ratio=0.5, max_breaks=3, seed=7
    )

    status = stat_file(path)
    splits = plan_splits(status, SplitConfig(lines_per_split=1))

    assert raw_newlines > records
    assert len(splits) == records
    assert sum(split.length for split in splits) == status.size


def test_generation_is_deterministic(tmp_path: Path) -> None:
    first = tmp_path / "first.csv"
    second = tmp_path / "second.csv"
    generate_synthetic_csv(str(first), rows=100, multiline_ratio=0.3, max_breaks=2, seed=3)
    generate_synthetic_csv(str(second), rows=100, multiline_ratio=0.3, max_breaks=2, seed=3)

    assert first.read_bytes() == second.read_bytes()
