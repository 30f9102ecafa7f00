# tests/test_main.py
"""Tests for the command-line driver."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from graph_distance.config import RunConfig
from graph_distance.main import config_from_args, main, parse_args


@pytest.fixture
def path_file(tmp_path: Path) -> Path:
    path = tmp_path / "edges.txt"
    path.write_text("0 1\n1 2\n2 3\n", encoding="utf-8")
    return path


def test_parse_args_defaults(path_file: Path) -> None:
    cfg = config_from_args(parse_args([str(path_file)]))
    assert isinstance(cfg, RunConfig)
    assert cfg.input.path == path_file
    assert cfg.analysis.source == 0
    assert cfg.graph.sort_vertices is True
    assert cfg.graph.dedup_edges is False


def test_parse_args_flags(path_file: Path) -> None:
    cfg = config_from_args(parse_args([str(path_file), "--source", "3", "--dedup", "--unsorted", "--header"]))
    assert cfg.analysis.source == 3
    assert cfg.graph.dedup_edges is True
    assert cfg.graph.sort_vertices is False
    assert cfg.input.has_header is True


def test_main_prints_statistics(path_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(path_file), "--show-distances"]) == 0
    out = capsys.readouterr().out
    assert "nodes: 4" in out
    assert "=== Components: 1 ===" in out
    assert "3: 3" in out
    assert "mean:    1.5000" in out
    assert "max:     3" in out
    assert "median:  1.5" in out


def test_main_reports_unreachable(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "edges.txt"
    path.write_text("0 1\n2 3\n", encoding="utf-8")
    assert main([str(path), "--show-distances"]) == 0
    out = capsys.readouterr().out
    assert "2: Unreachable" in out
    assert "reached: 2 of 4" in out


def test_main_writes_histogram(path_file: Path, tmp_path: Path) -> None:
    out_csv = tmp_path / "hist.csv"
    assert main([str(path_file), "--source", "1", "--histogram-csv", str(out_csv)]) == 0
    hist = pd.read_csv(out_csv)
    assert hist["distance"].tolist() == [0, 1, 2]
    assert hist["count"].tolist() == [1, 2, 1]


def test_main_unknown_source(path_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(path_file), "--source", "99"]) == 1
    assert "unknown vertex id 99" in capsys.readouterr().err


def test_main_parse_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "edges.txt"
    path.write_text("0 1\n1 two\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "line 2" in capsys.readouterr().err


def test_main_missing_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_main_bad_log_level(path_file: Path) -> None:
    assert main([str(path_file), "--log-level", "chatty"]) == 2


def test_main_invalid_utf8(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "edges.txt"
    path.write_bytes(b"0 1\n\xff\xfe 2\n")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert "line 2" in err
    assert "UTF-8" in err


def test_main_numeric_log_level(path_file: Path) -> None:
    assert main([str(path_file), "--log-level", "10"]) == 0
    assert main([str(path_file), "--log-level", "debug"]) == 0
