"""Command line argument handling package."""

from metarename.ui.cli.args.options import CLIArgs, InitConfigArgs, InspectArgs, RenameArgs
from metarename.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "InitConfigArgs", "InspectArgs", "RenameArgs"]
