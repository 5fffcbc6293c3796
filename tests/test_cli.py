"""Tests for the command-line interface."""

from pathlib import Path

import pytest

from csv_split_planner import cli
from csv_split_planner.job.execution import CSV_SPLIT_EXECUTOR_ENV


@pytest.fixture(autouse=True)
def serial_executor(monkeypatch) -> None:
    monkeypatch.setenv(CSV_SPLIT_EXECUTOR_ENV, "serial")


def test_prints_one_line_per_split(tmp_path: Path, capsys) -> None:
    path = tmp_path / "input.csv"
    path.write_bytes(b'a,"b\nc"\nd,e\n')

    assert cli.main([str(path), "--lines-per-split", "1"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [f"{path},0,8", f"{path},8,4"]


def test_custom_quote_and_separator(tmp_path: Path, capsys) -> None:
    path = tmp_path / "input.txt"
    path.write_bytes(b"1|'x\ny'\n2|z\n")

    assert cli.main([str(path), "-n", "2", "--delimiter", "'", "--separator", "|"]) == 0
    assert capsys.readouterr().out.splitlines() == [f"{path},0,{path.stat().st_size}"]


def test_invalid_configuration_exits_with_usage_error(tmp_path: Path) -> None:
    path = tmp_path / "input.csv"
    path.write_bytes(b"a\n")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(path), "--delimiter", ",", "--separator", ","])
    assert excinfo.value.code == 2


def test_non_positive_lines_per_split_rejected(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path), "--lines-per-split", "0"])
    assert excinfo.value.code == 2


def test_missing_input_returns_error_code(tmp_path: Path, capsys) -> None:
    assert cli.main([str(tmp_path / "missing.csv")]) == 1
    assert capsys.readouterr().out == ""
