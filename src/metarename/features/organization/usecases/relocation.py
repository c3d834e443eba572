"""
Summary: Move or copy a media file onto its rendered destination.
Why: Keep filesystem side effects out of the rendering engine.
"""

from __future__ import annotations

import shutil
from enum import StrEnum
from pathlib import Path

from metarename.platform.filesystem import ensure_parent_directory, find_available_path
from metarename.shared.errors import RelocationError


class RelocationMode(StrEnum):
    MOVE = "move"
    COPY = "copy"


def plan_destination(source: Path, target: Path) -> Path:
    """Return a collision-free destination for ``source``.

    A target that already is ``source`` is returned unchanged.
    """
    return find_available_path(target, existing_path=source)


def is_same_location(source: Path, destination: Path) -> bool:
    try:
        return destination.exists() and destination.samefile(source)
    except OSError:
        return False


def relocate_file(
    source: Path,
    target: Path,
    *,
    mode: RelocationMode = RelocationMode.MOVE,
    dry_run: bool = False,
) -> Path:
    """Relocate ``source`` to ``target`` or the next free sibling of it.

    Args:
        source: Existing file to relocate.
        target: Desired destination path.
        mode: Whether to move or copy.
        dry_run: Only compute the destination.

    Returns:
        Path: The destination actually used (or that would be used).

    Raises:
        RelocationError: If the filesystem operation fails.
    """
    destination = plan_destination(source, target)
    if dry_run or is_same_location(source, destination):
        return destination

    try:
        _ = ensure_parent_directory(destination)
        if mode is RelocationMode.COPY:
            _ = shutil.copy2(source, destination)
        else:
            _ = shutil.move(str(source), str(destination))
    except OSError as exc:
        raise RelocationError(source, destination, str(exc)) from exc
    return destination


__all__ = ["RelocationMode", "is_same_location", "plan_destination", "relocate_file"]
