"""src/metarename/ui/cli/display/result.py
What: Render user-facing summaries and previews for rename runs.
Why: Keep console output formatting consistent across commands.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape as escape_markup
from rich.tree import Tree

from metarename.application.services import RenameResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_preview(self, results: Sequence[RenameResult], base_path: Path) -> None:
        """Display planned destinations as a directory tree."""

        self.console.print("\n[bold cyan]Preview of planned changes:[/bold cyan]")
        tree = Tree(f"📁 {escape_markup(str(base_path))}")
        nodes: dict[tuple[str, ...], Tree] = {}

        for result in results:
            if not result.success or result.target_path is None:
                continue
            try:
                parts = result.target_path.relative_to(base_path).parts
            except ValueError:
                parts = result.target_path.parts

            parent = tree
            for depth in range(len(parts) - 1):
                key = parts[: depth + 1]
                if key not in nodes:
                    nodes[key] = parent.add(f"📁 {escape_markup(parts[depth])}")
                parent = nodes[key]
            marker = "↪️" if result.unchanged else "🎵"
            leaf = parts[-1] if parts else str(result.target_path)
            _ = parent.add(f"{marker} {escape_markup(leaf)}")

        self.console.print(tree)

    def show_results(self, results: Sequence[RenameResult], quiet: bool = False) -> None:
        """Display processing results.

        Args:
            results: Results of the run.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        success_count = sum(1 for result in results if result.success)
        failures = [result for result in results if not result.success]
        flagged = sum(1 for result in results if result.diagnostics)

        self.console.print("\n[bold]Rename Summary:[/bold]")
        self.console.print(f"Total files processed: {len(results)}")
        self.console.print(f"[green]Successful: {success_count}[/green]")
        if flagged:
            self.console.print(f"[yellow]With metadata warnings: {flagged}[/yellow]")

        if not failures:
            return

        self.console.print(f"[red]Failed: {len(failures)}[/red]")
        for failed in failures:
            source = escape_markup(str(failed.source_path))
            message = escape_markup(failed.error_message or "")
            self.console.print(f"[red]  • {source}: {message}[/red]")
