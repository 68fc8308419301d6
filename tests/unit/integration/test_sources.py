"""Unit tests for read-then-clear log sources."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from chargestats.integration import CONSUMED_MARKER, ChargeLogSources, LogSource, SourcePaths, is_consumed


def test_consume_reads_then_clears(tmp_path: Path) -> None:
    path = tmp_path / "charge_stats"
    path.write_text("1,5000,1500,50,4000,80,4100\n", encoding="utf-8")
    source = LogSource(path)

    assert source.consume() == "1,5000,1500,50,4000,80,4100\n"
    assert path.read_text(encoding="utf-8") == CONSUMED_MARKER
    assert source.consume() is None


def test_new_data_after_clear_is_consumed_again(tmp_path: Path) -> None:
    path = tmp_path / "thermal"
    path.write_text("first\n", encoding="utf-8")
    source = LogSource(path)
    source.consume()

    path.write_text("second\n", encoding="utf-8")

    assert source.consume() == "second\n"


def test_unreadable_source_yields_no_data(tmp_path: Path) -> None:
    source = LogSource(tmp_path / "missing")

    assert source.consume() is None
    assert source.peek() is None
    with pytest.raises(OSError):
        source.read_text()


def test_peek_does_not_clear(tmp_path: Path) -> None:
    path = tmp_path / "gcharger"
    path.write_text("D:1,2,3,4,5,6,7\n", encoding="utf-8")
    source = LogSource(path)

    assert source.peek() == "D:1,2,3,4,5,6,7\n"
    assert path.read_text(encoding="utf-8") == "D:1,2,3,4,5,6,7\n"


def test_clear_failure_is_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    directory = tmp_path / "not_a_file"
    directory.mkdir()

    with caplog.at_level(logging.ERROR, logger="chargestats"):
        cleared = LogSource(directory).clear()

    assert cleared is False
    assert "Couldn't clear" in caplog.text


@pytest.mark.parametrize(("contents", "expected"), [("", True), ("0", True), ("0\n", True), ("\x00", True), ("1", False)])
def test_is_consumed(contents: str, expected: bool) -> None:
    assert is_consumed(contents) is expected


def test_sources_from_paths(tmp_path: Path) -> None:
    paths = SourcePaths(
        charge_stats=tmp_path / "a",
        wireless=tmp_path / "b",
        pca=tmp_path / "c",
        thermal=tmp_path / "d",
        gcharger=tmp_path / "e",
        dual_battery=tmp_path / "f",
    )

    sources = ChargeLogSources.from_paths(paths)

    assert sources.charge_stats.path == tmp_path / "a"
    assert sources.dual_battery.path == tmp_path / "f"


def test_empty_source_path_is_rejected() -> None:
    with pytest.raises(ValueError, match="pca path is required"):
        SourcePaths(pca="  ")
