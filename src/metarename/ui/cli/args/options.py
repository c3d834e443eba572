"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from metarename.features.organization import RelocationMode


@final
@dataclass(slots=True)
class RenameArgs:
    """Command line arguments for the ``rename`` or ``plan`` subcommands."""

    command: Literal["rename", "plan"]
    source_path: Path
    target_path: Path | None
    pattern: str
    mode: RelocationMode
    dry_run: bool
    prune_empty: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for the ``inspect`` subcommand."""

    command: Literal["inspect"]
    file_path: Path
    pattern: str


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    config_path: Path
    force: bool


CLIArgs = RenameArgs | InspectArgs | InitConfigArgs

__all__ = ["CLIArgs", "InitConfigArgs", "InspectArgs", "RenameArgs"]
