"""Tests for command line argument parsing."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from metarename.features.organization import RelocationMode
from metarename.features.path import PATTERN_DEFAULT
from metarename.ui.cli.args import ArgumentParser, InitConfigArgs, InspectArgs, RenameArgs


@pytest.fixture(autouse=True)
def quiet_logging(mocker: MockerFixture) -> None:
    """Keep parser tests from writing log files."""

    _ = mocker.patch("metarename.ui.cli.args.parser.setup_logger")


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    _ = path.write_text('pattern = "artist/title.extension"\n', encoding="utf-8")
    return path


def test_rename_uses_config_pattern(tmp_path: Path, config_file: Path) -> None:
    args = ArgumentParser.process_args(
        ["--config", str(config_file), "rename", str(tmp_path), "--target", str(tmp_path / "lib")]
    )

    assert isinstance(args, RenameArgs)
    assert args.pattern == "artist/title.extension"
    assert args.target_path == tmp_path / "lib"
    assert args.mode is RelocationMode.MOVE
    assert not args.dry_run


def test_plan_is_a_dry_run_with_cli_overrides(tmp_path: Path) -> None:
    args = ArgumentParser.process_args(
        [
            "--config",
            str(tmp_path / "absent.toml"),
            "plan",
            str(tmp_path),
            "--pattern",
            "album/title",
            "--copy",
            "--prune-empty",
        ]
    )

    assert isinstance(args, RenameArgs)
    assert args.dry_run
    assert args.pattern == "album/title"
    assert args.mode is RelocationMode.COPY
    assert args.prune_empty
    assert args.target_path is None


def test_missing_source_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(
            ["--config", str(tmp_path / "absent.toml"), "rename", str(tmp_path / "missing")]
        )

    assert exc_info.value.code == 1


def test_inspect_requires_file(tmp_path: Path) -> None:
    song = tmp_path / "song.mp3"
    _ = song.write_bytes(b"x")

    args = ArgumentParser.process_args(["--config", str(tmp_path / "absent.toml"), "inspect", str(song)])

    assert isinstance(args, InspectArgs)
    assert args.pattern == PATTERN_DEFAULT


def test_init_config_targets_config_option(tmp_path: Path) -> None:
    target = tmp_path / "new.toml"

    args = ArgumentParser.process_args(["--config", str(target), "init-config", "--force"])

    assert isinstance(args, InitConfigArgs)
    assert args.config_path == target
    assert args.force


def test_broken_config_exits(tmp_path: Path) -> None:
    broken = tmp_path / "broken.toml"
    _ = broken.write_text("mode = ", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(["--config", str(broken), "rename", str(tmp_path)])

    assert exc_info.value.code == 1
