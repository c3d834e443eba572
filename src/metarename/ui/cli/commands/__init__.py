"""Command execution package for CLI."""

from metarename.ui.cli.commands.init_config import InitConfigCommand
from metarename.ui.cli.commands.inspect import InspectCommand
from metarename.ui.cli.commands.rename import RenameCommand

__all__ = ["InitConfigCommand", "InspectCommand", "RenameCommand"]
