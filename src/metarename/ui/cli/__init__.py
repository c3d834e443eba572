"""Command line interface package."""

from metarename.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
