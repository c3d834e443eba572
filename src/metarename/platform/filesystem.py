"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def remove_empty_directories(directory: Path) -> list[Path]:
    """Remove empty directories below and including ``directory``, bottom-up.

    Returns:
        list[Path]: Directories that were removed.
    """
    removed: list[Path] = []
    if not directory.exists():
        return removed

    for root, _, _ in os.walk(str(directory), topdown=False):
        root_path = Path(root)
        try:
            if root_path.exists() and not any(root_path.iterdir()):
                root_path.rmdir()
                removed.append(root_path)
        except OSError:
            continue
    return removed


def find_available_path(target_path: Path, *, existing_path: Path | None = None) -> Path:
    """Find an available file path by appending a number if needed."""

    if not target_path.exists():
        return target_path

    if existing_path is not None:
        try:
            if target_path.samefile(existing_path):
                return target_path
        except FileNotFoundError:
            pass

    parent = target_path.parent
    stem = target_path.stem
    extension = target_path.suffix
    counter = 1

    while True:
        candidate = parent / f"{stem} ({counter}){extension}"
        if not candidate.exists():
            return candidate
        counter += 1


def describe_attributes(path: Path) -> str:
    """Summarize a path's state as attribute letters.

    E exists, F file, D directory, R readable, W writable, X executable,
    H hidden (dot-name), L symbolic link.
    """
    letters: list[str] = []
    exists = path.exists()
    if exists:
        letters.append("E")
    if path.is_file():
        letters.append("F")
    if path.is_dir():
        letters.append("D")
    if os.access(path, os.R_OK):
        letters.append("R")
    if os.access(path, os.W_OK):
        letters.append("W")
    if os.access(path, os.X_OK):
        letters.append("X")
    if exists:
        if path.name.startswith("."):
            letters.append("H")
        if path.is_symlink():
            letters.append("L")
    return "".join(letters)


__all__ = [
    "describe_attributes",
    "ensure_directory",
    "ensure_parent_directory",
    "find_available_path",
    "remove_empty_directories",
]
