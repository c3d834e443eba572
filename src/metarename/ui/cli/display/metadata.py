"""Rich tables listing metadata fields side by side."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape as escape_markup
from rich.table import Table

from metarename.features.metadata import Diagnostic
from metarename.shared.metadata_record import MetadataRecord


@final
class MetadataDisplay:
    """Show raw and normalized metadata for a single file."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @staticmethod
    def build_table(raw: MetadataRecord, normalized: MetadataRecord) -> Table:
        table = Table(title="Metadata", show_lines=False)
        table.add_column("Field", style="bold")
        table.add_column("Raw")
        table.add_column("Normalized")

        names = list(dict.fromkeys([*raw.names(), *normalized.names()]))
        for name in names:
            raw_value = " | ".join(raw.values(name)) if name in raw else "—"
            normalized_value = " | ".join(normalized.values(name)) if name in normalized else "—"
            style = "cyan" if raw_value != normalized_value else None
            table.add_row(name, raw_value, normalized_value, style=style)
        return table

    def show(
        self,
        *,
        file_name: str,
        attributes: str,
        raw: MetadataRecord,
        normalized: MetadataRecord,
        diagnostics: tuple[Diagnostic, ...],
        rendered: str,
    ) -> None:
        self.console.print(f"[bold]{escape_markup(file_name)}[/bold] [dim]({attributes})[/dim]")
        self.console.print(self.build_table(raw, normalized))
        for diagnostic in diagnostics:
            self.console.print(f"[yellow]⚠ {escape_markup(str(diagnostic))}[/yellow]")
        self.console.print(f"Rendered path: [green]{escape_markup(rendered)}[/green]")
