"""Execute the ``init-config`` subcommand."""

from __future__ import annotations

from pathlib import Path
from typing import final

from metarename.config import Config
from metarename.platform.logging import logger
from metarename.ui.cli.args.options import InitConfigArgs


@final
class InitConfigCommand:
    """Write the default configuration file."""

    args: InitConfigArgs

    def __init__(self, args: InitConfigArgs) -> None:
        self.args = args

    def execute(self) -> Path | None:
        """Return the written path, or ``None`` when an existing file was kept."""

        target = self.args.config_path
        if target.exists() and not self.args.force:
            logger.warning("Configuration already exists at %s (use --force)", target)
            return None
        return Config().save(target)
