"""Execute the ``inspect`` subcommand."""

from __future__ import annotations

from typing import final

from metarename.features.metadata import MetadataExtractor, normalize
from metarename.features.path import render
from metarename.platform.filesystem import describe_attributes
from metarename.shared.metadata_record import MetadataRecord
from metarename.ui.cli.args.options import InspectArgs
from metarename.ui.cli.display import MetadataDisplay


@final
class InspectCommand:
    """List every metadata field of one file before and after normalization."""

    args: InspectArgs
    display: MetadataDisplay

    def __init__(self, args: InspectArgs) -> None:
        self.args = args
        self.display = MetadataDisplay()

    def execute(self) -> MetadataRecord:
        """Show the file's metadata and return the normalized record.

        Raises:
            MetadataExtractionError: If the file's tags cannot be read.
        """
        file_path = self.args.file_path
        raw = MetadataExtractor.extract(file_path)
        normalized = normalize(raw)
        rendered = render(self.args.pattern, normalized.record, file_path.suffix)

        self.display.show(
            file_name=file_path.name,
            attributes=describe_attributes(file_path),
            raw=raw,
            normalized=normalized.record,
            diagnostics=normalized.diagnostics,
            rendered=rendered,
        )
        return normalized.record
