"""src/metarename/ui/cli/commands/rename.py
What: Execute the ``rename`` and ``plan`` subcommands.
Why: Wire parsed arguments to the rename service and result displays.
"""

from __future__ import annotations

from typing import final

from metarename.application.services import RenameResult, RenameService
from metarename.ui.cli.args.options import RenameArgs
from metarename.ui.cli.display import ResultDisplay


@final
class RenameCommand:
    """Rename a single file or a directory tree."""

    args: RenameArgs
    service: RenameService
    result_display: ResultDisplay

    def __init__(self, args: RenameArgs, service: RenameService | None = None) -> None:
        self.args = args
        self.service = service or RenameService(
            args.pattern,
            target_root=args.target_path,
            mode=args.mode,
            dry_run=args.dry_run,
            prune_empty=args.prune_empty,
        )
        self.result_display = ResultDisplay()

    def execute(self) -> list[RenameResult]:
        results = self.service.process(self.args.source_path)

        if self.args.dry_run and not self.args.quiet:
            base_path = self.args.target_path or (
                self.args.source_path
                if self.args.source_path.is_dir()
                else self.args.source_path.parent
            )
            self.result_display.show_preview(results, base_path)

        self.result_display.show_results(results, quiet=self.args.quiet)
        return results
