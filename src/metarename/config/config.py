"""Configuration management for metarename."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from metarename.config.paths import default_config_path
from metarename.features.path.domain.pattern import PATTERN_DEFAULT
from metarename.platform.filesystem import ensure_parent_directory
from metarename.platform.logging import logger
from metarename.shared.errors import ConfigError

MODE_CHOICES: tuple[str, ...] = ("move", "copy")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects converted in ``__post_init__``."""

    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Naming pattern, "/" separates directories
    pattern: str = PATTERN_DEFAULT

    # Library root that rendered paths are relative to
    target_path: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # "move" or "copy"
    mode: str = "move"

    def __post_init__(self) -> None:
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if self.mode not in MODE_CHOICES:
            raise ConfigError(
                f"Invalid mode {self.mode!r}; expected one of {', '.join(MODE_CHOICES)}"
            )
        if not self.pattern.strip():
            raise ConfigError("Naming pattern must not be empty")

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from ``path`` or the default location.

        Returns the default configuration when the file does not exist.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        config_file = path if path is not None else default_config_path()
        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise ConfigError(f"Cannot read {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        instance = cls(**{key: value for key, value in config_dict.items() if key in known})
        logger.debug("Configuration loaded from %s", config_file)
        return instance

    def save(self, path: Path | None = None) -> Path:
        """Save configuration as commented TOML and return the written path."""

        target = path if path is not None else default_config_path()
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            _ = ensure_parent_directory(target)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        lines: list[str] = []

        lines.append("# metarename configuration file")
        lines.append("")

        lines.append("# Naming pattern. Field names are replaced by metadata values,")
        lines.append("# '/' separates directories and a trailing 'extension' keeps the file type.")
        lines.append(f"pattern = {self._format_toml_value(config['pattern'])}")
        lines.append("")

        lines.append("# Library root for renamed files (optional, defaults to the source)")
        lines.append('# Example: target_path = "/path/to/library"')
        if config["target_path"] is not None:
            lines.append(f"target_path = {self._format_toml_value(config['target_path'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append('# Relocation mode: "move" or "copy"')
        lines.append(f"mode = {self._format_toml_value(config['mode'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)


__all__ = ["Config", "MODE_CHOICES"]
