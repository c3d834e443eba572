"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from metarename.config import Config, default_config_path, default_log_file
from metarename.features.organization import RelocationMode
from metarename.platform.logging import logger, setup_logger
from metarename.shared.errors import ConfigError
from metarename.ui.cli.args.options import CLIArgs, InitConfigArgs, InspectArgs, RenameArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="metarename",
            description="Rename and relocate media files from their metadata.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Path to the TOML configuration file",
            metavar="CONFIG_PATH",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        rename_parser = subparsers.add_parser(
            "rename",
            help="Rename a file or every media file below a directory",
        )
        ArgumentParser._configure_rename_parser(rename_parser, dry_run_default=False)

        plan_parser = subparsers.add_parser(
            "plan",
            help="Preview rename results without touching the filesystem",
        )
        ArgumentParser._configure_rename_parser(plan_parser, dry_run_default=True)

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="List the raw and normalized metadata of one file",
        )
        _ = inspect_parser.add_argument(
            "file_path",
            type=str,
            help="Media file to inspect",
            metavar="FILE",
        )
        _ = inspect_parser.add_argument(
            "--pattern",
            type=str,
            help="Naming pattern used to show the rendered path",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a configuration file with default values",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_path = Path(parsed_args.config) if parsed_args.config else default_config_path()
        _ = setup_logger(console_level=log_level)

        try:
            configuration = Config.load(config_path)
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(1)

        _ = setup_logger(
            log_file=configuration.log_file or default_log_file(),
            console_level=log_level,
        )

        command: str = parsed_args.command

        if command in {"rename", "plan"}:
            return ArgumentParser._process_rename(parsed_args, configuration)

        if command == "inspect":
            return ArgumentParser._process_inspect(parsed_args, configuration)

        if command == "init-config":
            return InitConfigArgs(
                command="init-config",
                config_path=config_path,
                force=bool(parsed_args.force),
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _configure_rename_parser(
        parser: argparse.ArgumentParser,
        *,
        dry_run_default: bool,
    ) -> None:
        """Apply shared configuration for rename-style subparsers."""

        parser.set_defaults(dry_run=dry_run_default)
        _ = parser.add_argument(
            "source_path",
            type=str,
            help="Media file or directory to process",
            metavar="SOURCE_PATH",
        )
        _ = parser.add_argument(
            "--target",
            type=str,
            help="Library root for renamed files (defaults to the source directory)",
            metavar="TARGET_PATH",
        )
        _ = parser.add_argument(
            "--pattern",
            type=str,
            help="Naming pattern, e.g. 'albumArtist/album/trackNumber - title.extension'",
        )
        _ = parser.add_argument(
            "--copy",
            action="store_true",
            help="Copy files instead of moving them",
        )
        _ = parser.add_argument(
            "--prune-empty",
            action="store_true",
            help="Remove directories left empty after moving",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _process_rename(parsed_args: argparse.Namespace, configuration: Config) -> RenameArgs:
        source_path = Path(parsed_args.source_path)
        if not source_path.exists():
            logger.error("Source path does not exist: %s", source_path)
            sys.exit(1)

        if parsed_args.target:
            target_path: Path | None = Path(parsed_args.target)
        else:
            target_path = configuration.target_path

        mode = RelocationMode.COPY if parsed_args.copy else RelocationMode(configuration.mode)

        return RenameArgs(
            command=parsed_args.command,
            source_path=source_path,
            target_path=target_path,
            pattern=parsed_args.pattern or configuration.pattern,
            mode=mode,
            dry_run=parsed_args.dry_run,
            prune_empty=parsed_args.prune_empty,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_inspect(parsed_args: argparse.Namespace, configuration: Config) -> InspectArgs:
        file_path = Path(parsed_args.file_path)
        if not file_path.is_file():
            logger.error("File does not exist: %s", file_path)
            sys.exit(1)

        return InspectArgs(
            command="inspect",
            file_path=file_path,
            pattern=parsed_args.pattern or configuration.pattern,
        )
