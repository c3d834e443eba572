"""Command line interface for metarename."""

import sys
from typing import final

from metarename.platform.logging import logger
from metarename.shared.errors import MetarenameError
from metarename.ui.cli.args import ArgumentParser
from metarename.ui.cli.args.options import CLIArgs, InitConfigArgs, InspectArgs, RenameArgs
from metarename.ui.cli.commands import InitConfigCommand, InspectCommand, RenameCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, RenameArgs):
                results = RenameCommand(args).execute()
                if any(not r.success for r in results):
                    sys.exit(1)
                return

            if isinstance(args, InspectArgs):
                _ = InspectCommand(args).execute()
                return

            assert isinstance(args, InitConfigArgs)
            _ = InitConfigCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except MetarenameError as e:
            logger.error("%s", e)
            sys.exit(1)
        except OSError as e:
            logger.error("An unexpected error occurred: %s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor``.
    """
    CommandProcessor.process_command()
    return 0
