"""Tests for shared filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from metarename.platform.filesystem import (
    describe_attributes,
    ensure_directory,
    find_available_path,
    remove_empty_directories,
)


def test_ensure_directory_rejects_files(tmp_path: Path) -> None:
    file_path = tmp_path / "file.txt"
    _ = file_path.write_text("x")

    with pytest.raises(NotADirectoryError):
        _ = ensure_directory(file_path)


def test_ensure_directory_creates_nested(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b"

    assert ensure_directory(nested) == nested
    assert nested.is_dir()


def test_find_available_path_counts_up(tmp_path: Path) -> None:
    target = tmp_path / "song.mp3"
    _ = target.write_text("1")
    _ = (tmp_path / "song (1).mp3").write_text("2")

    assert find_available_path(target) == tmp_path / "song (2).mp3"


def test_find_available_path_accepts_same_file(tmp_path: Path) -> None:
    target = tmp_path / "song.mp3"
    _ = target.write_text("1")

    assert find_available_path(target, existing_path=target) == target


def test_remove_empty_directories_keeps_populated(tmp_path: Path) -> None:
    (tmp_path / "empty" / "deeper").mkdir(parents=True)
    (tmp_path / "full").mkdir()
    _ = (tmp_path / "full" / "keep.mp3").write_text("x")

    removed = remove_empty_directories(tmp_path)

    assert tmp_path / "empty" / "deeper" in removed
    assert not (tmp_path / "empty").exists()
    assert (tmp_path / "full" / "keep.mp3").exists()


def test_describe_attributes_for_regular_file(tmp_path: Path) -> None:
    file_path = tmp_path / "song.mp3"
    _ = file_path.write_text("x")
    os.chmod(file_path, 0o644)

    letters = describe_attributes(file_path)

    assert letters.startswith("EF")
    assert "D" not in letters
    assert "R" in letters


def test_describe_attributes_for_hidden_directory(tmp_path: Path) -> None:
    hidden = tmp_path / ".cache"
    hidden.mkdir()

    letters = describe_attributes(hidden)

    assert letters.startswith("ED")
    assert letters.endswith("H")


def test_describe_attributes_for_missing_path(tmp_path: Path) -> None:
    assert describe_attributes(tmp_path / "missing") == ""
