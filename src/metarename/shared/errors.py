"""Exception hierarchy for metarename collaborators."""

from __future__ import annotations

from pathlib import Path


class MetarenameError(Exception):
    """Base class for errors raised by metarename."""


class MetadataExtractionError(MetarenameError):
    """Raised when tags cannot be read from a media file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read metadata from {path}: {reason}")
        self.path = path
        self.reason = reason


class RelocationError(MetarenameError):
    """Raised when a file cannot be moved or copied to its rendered path."""

    def __init__(self, source: Path, target: Path, reason: str) -> None:
        super().__init__(f"Cannot relocate {source} to {target}: {reason}")
        self.source = source
        self.target = target
        self.reason = reason


class ConfigError(MetarenameError):
    """Raised when the configuration file cannot be parsed."""


__all__ = [
    "ConfigError",
    "MetadataExtractionError",
    "MetarenameError",
    "RelocationError",
]
