"""Tests for job-level planning across files."""

import io
from pathlib import Path

import pytest

from csv_split_planner.config import SplitConfig
from csv_split_planner.errors import InputError
from csv_split_planner.job import plan_files, plan_job
from csv_split_planner.job.execution import CSV_SPLIT_EXECUTOR_ENV
from csv_split_planner.planner import FileStatus, SplitDescriptor


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    data_dir = tmp_path / "in"
    data_dir.mkdir()
    (data_dir / "part-0.csv").write_bytes(b'a,"1\n2"\nb,3\nc,4\n')
    (data_dir / "part-1.csv").write_bytes(b"d,5\ne,6")
    (data_dir / "part-2.csv").write_bytes(b"")
    return data_dir


class TestPlanJob:
    """Test cases for plan_job."""

    @pytest.mark.parametrize("mode", ["serial", "threads"])
    def test_splits_grouped_by_file_in_order(
        self, input_dir: Path, monkeypatch, mode: str
    ) -> None:
        """Test that splits are concatenated per file in listing order."""
        monkeypatch.setenv(CSV_SPLIT_EXECUTOR_ENV, mode)
        splits = plan_job([input_dir], SplitConfig(lines_per_split=2), workers=2)

        part0 = input_dir / "part-0.csv"
        part1 = input_dir / "part-1.csv"
        assert splits == [
            SplitDescriptor(part0, 0, 12),
            SplitDescriptor(part0, 12, 4),
            SplitDescriptor(part1, 0, 7),
        ]

    def test_offsets_are_file_relative(self, input_dir: Path, monkeypatch) -> None:
        """Test that each file's splits start again at offset 0."""
        monkeypatch.setenv(CSV_SPLIT_EXECUTOR_ENV, "serial")
        splits = plan_job([input_dir], SplitConfig(lines_per_split=1))

        first_by_file: dict[Path, int] = {}
        for split in splits:
            first_by_file.setdefault(split.path, split.offset)
        assert set(first_by_file.values()) == {0}

    def test_nested_directory_fails_whole_run(self, input_dir: Path, monkeypatch) -> None:
        """Test that a non-file entry aborts planning for every file."""
        monkeypatch.setenv(CSV_SPLIT_EXECUTOR_ENV, "serial")
        (input_dir / "nested").mkdir()

        with pytest.raises(InputError, match="Not a file"):
            plan_job([input_dir], SplitConfig())

    def test_missing_input_fails(self, tmp_path: Path) -> None:
        """Test that a path that does not exist is reported."""
        with pytest.raises(InputError):
            plan_job([tmp_path / "missing.csv"], SplitConfig())


class TestPlanFiles:
    """Test cases for plan_files."""

    def test_non_file_checked_before_any_read(self, tmp_path: Path, monkeypatch) -> None:
        """Test that no stream is opened when one entry is not a file."""
        monkeypatch.setenv(CSV_SPLIT_EXECUTOR_ENV, "serial")
        opened = []

        def opener(path):
            opened.append(path)
            raise AssertionError("should not open")

        files = [
            FileStatus(path=tmp_path / "ok.csv", size=4, is_file=True),
            FileStatus(path=tmp_path / "dir", size=0, is_file=False),
        ]
        with pytest.raises(InputError):
            plan_files(files, SplitConfig(), opener=opener)
        assert opened == []

    def test_no_files_no_splits(self) -> None:
        assert plan_files([], SplitConfig()) == []


class TestCustomOpener:
    """Test cases for planning several files through a custom stream provider."""

    def test_lambda_opener_with_default_executor(self, monkeypatch) -> None:
        """Test that an unpicklable opener works when no executor is forced."""
        monkeypatch.delenv(CSV_SPLIT_EXECUTOR_ENV, raising=False)
        files = [
            FileStatus(path=Path("m0"), size=4, is_file=True),
            FileStatus(path=Path("m1"), size=4, is_file=True),
        ]

        splits = plan_files(files, SplitConfig(), opener=lambda path: io.BytesIO(b"a\nb\n"))

        assert splits == [
            SplitDescriptor(Path("m0"), 0, 2),
            SplitDescriptor(Path("m0"), 2, 2),
            SplitDescriptor(Path("m1"), 0, 2),
            SplitDescriptor(Path("m1"), 2, 2),
        ]

    def test_lambda_opener_when_processes_requested(self, monkeypatch) -> None:
        """Test that asking for processes with a lambda opener still plans every file."""
        monkeypatch.setenv(CSV_SPLIT_EXECUTOR_ENV, "processes")
        files = [FileStatus(path=Path(f"m{i}"), size=2, is_file=True) for i in range(3)]

        splits = plan_files(
            files, SplitConfig(lines_per_split=5), opener=lambda path: io.BytesIO(b"x\n")
        )

        assert [split.path for split in splits] == [Path("m0"), Path("m1"), Path("m2")]
