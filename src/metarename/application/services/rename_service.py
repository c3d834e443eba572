"""
Summary: Run extraction, normalization, rendering and relocation per media file.
Why: Give the CLI one entry point that turns a file or directory into results.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Final, final

from metarename.features.metadata import (
    Diagnostic,
    MetadataExtractor,
    normalize,
)
from metarename.features.organization.usecases.relocation import (
    RelocationMode,
    is_same_location,
    relocate_file,
)
from metarename.features.path import PATTERN_DEFAULT, Pattern, parse_pattern, render_components
from metarename.platform.filesystem import remove_empty_directories
from metarename.platform.logging import logger
from metarename.shared.errors import MetarenameError, RelocationError
from metarename.shared.metadata_record import MetadataRecord

_DOT_COMPONENTS: Final[frozenset[str]] = frozenset({".", ".."})


class RenameEvent(StrEnum):
    """Structured event identifiers for rename logs."""

    DIRECTORY_START = "rename.directory.start"
    DIRECTORY_COMPLETE = "rename.directory.complete"
    DIRECTORY_NO_FILES = "rename.directory.no_files"
    FILE_START = "rename.file.start"
    FILE_SUCCESS = "rename.file.success"
    FILE_UNCHANGED = "rename.file.unchanged"
    FILE_DIAGNOSTIC = "rename.file.diagnostic"
    FILE_ERROR = "rename.file.error"
    FILE_MOVE = "rename.file.move"
    FILE_COPY = "rename.file.copy"
    FILE_PLAN = "rename.file.plan"


@final
@dataclass(slots=True)
class RenameResult:
    """Outcome of processing one media file."""

    source_path: Path
    target_path: Path | None = None
    success: bool = False
    record: MetadataRecord | None = None
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)
    error_message: str | None = None
    unchanged: bool = False


@final
class RenameService:
    """Rename media files according to a naming pattern."""

    pattern: Pattern
    target_root: Path | None
    mode: RelocationMode
    dry_run: bool
    prune_empty: bool

    def __init__(
        self,
        pattern: str | Pattern = PATTERN_DEFAULT,
        *,
        target_root: Path | None = None,
        mode: RelocationMode = RelocationMode.MOVE,
        dry_run: bool = False,
        prune_empty: bool = False,
        extract: Callable[[Path], MetadataRecord] = MetadataExtractor.extract,
    ) -> None:
        self.pattern = pattern if isinstance(pattern, Pattern) else parse_pattern(pattern)
        self.target_root = target_root
        self.mode = mode
        self.dry_run = dry_run
        self.prune_empty = prune_empty
        self._extract = extract

    def build_target(self, source: Path, record: MetadataRecord, root: Path) -> Path:
        """Render ``record`` for ``source`` below ``root``.

        Raises:
            RelocationError: If the rendered path is empty, contains a ``.`` or
                ``..`` component, or resolves outside ``root``.
        """
        components = render_components(self.pattern, record, source.suffix)
        target = root.joinpath(*components)
        if not components:
            raise RelocationError(source, target, "rendered path is empty")
        if any(component in _DOT_COMPONENTS for component in components):
            raise RelocationError(source, target, "rendered path contains a dot-only component")
        if not target.resolve().is_relative_to(root.resolve()):
            raise RelocationError(source, target, "rendered path leaves the target directory")
        return target

    def process_file(self, source: Path, *, source_root: Path | None = None) -> RenameResult:
        """Rename a single media file.

        Args:
            source: Media file to process.
            source_root: Root used when no target root was configured;
                defaults to the file's parent directory.

        Returns:
            RenameResult: Outcome, including diagnostics from normalization.
        """
        result = RenameResult(source_path=source)
        root = self.target_root or source_root or source.parent
        logger.debug("Processing %s", source, extra={"event": RenameEvent.FILE_START})

        try:
            normalized = normalize(self._extract(source))
            result.record = normalized.record
            result.diagnostics = normalized.diagnostics
            for diagnostic in normalized.diagnostics:
                logger.warning(
                    "%s: %s", source.name, diagnostic, extra={"event": RenameEvent.FILE_DIAGNOSTIC}
                )

            target = self.build_target(source, normalized.record, root)
            if is_same_location(source, target):
                result.target_path = target
                result.success = True
                result.unchanged = True
                logger.info(
                    "Already named: %s", target, extra={"event": RenameEvent.FILE_UNCHANGED}
                )
                return result

            destination = relocate_file(source, target, mode=self.mode, dry_run=self.dry_run)
            result.target_path = destination
            result.success = True
            self._log_relocation(source, destination)
            return result

        except MetarenameError as exc:
            result.error_message = str(exc)
            logger.error(
                "Failed to rename %s: %s", source, exc, extra={"event": RenameEvent.FILE_ERROR}
            )
            return result

    def process_directory(self, directory: Path) -> list[RenameResult]:
        """Rename every supported media file below ``directory``."""

        files = sorted(
            path
            for path in directory.rglob("*")
            if path.is_file() and MetadataExtractor.is_supported(path)
        )
        if not files:
            logger.info(
                "No supported media files in %s",
                directory,
                extra={"event": RenameEvent.DIRECTORY_NO_FILES},
            )
            return []

        logger.info(
            "Renaming %d files in %s",
            len(files),
            directory,
            extra={"event": RenameEvent.DIRECTORY_START},
        )
        results = [self.process_file(path, source_root=directory) for path in files]

        if self.prune_empty and not self.dry_run and self.mode is RelocationMode.MOVE:
            # the source root itself is kept
            for child in sorted(p for p in directory.iterdir() if p.is_dir()):
                for removed in remove_empty_directories(child):
                    logger.debug("Removed empty directory %s", removed)

        succeeded = sum(1 for result in results if result.success)
        logger.info(
            "Finished %s: %d/%d succeeded",
            directory,
            succeeded,
            len(results),
            extra={"event": RenameEvent.DIRECTORY_COMPLETE},
        )
        return results

    def process(self, path: Path) -> list[RenameResult]:
        if path.is_dir():
            return self.process_directory(path)
        return [self.process_file(path)]

    def _log_relocation(self, source: Path, destination: Path) -> None:
        if self.dry_run:
            event, verb = RenameEvent.FILE_PLAN, "Would place"
        elif self.mode is RelocationMode.COPY:
            event, verb = RenameEvent.FILE_COPY, "Copied"
        else:
            event, verb = RenameEvent.FILE_MOVE, "Moved"
        logger.log(
            logging.INFO,
            "%s %s -> %s",
            verb,
            source,
            destination,
            extra={"event": event},
        )


__all__ = ["RenameEvent", "RenameResult", "RenameService"]
