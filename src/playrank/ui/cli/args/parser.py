"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from playrank.config.config import Config
from playrank.config.settings import normalize_extension, resolve_jobs
from playrank.platform.logging import logger, setup_logger
from playrank.ui.cli.args.options import CLIArgs, RankArgs


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
            prog="playrank",
            description=(
                "Read CSV files exported from Google Play Music takeout and "
                "print your most listened songs."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "directory",
            type=str,
            help="Directory where to read CSV files from",
            metavar="DIR",
        )
        _ = parser.add_argument(
            "-j",
            "--jobs",
            type=int,
            default=None,
            help="Number of threads to use (defaults to the configured value, 8)",
        )
        _ = parser.add_argument(
            "--extension",
            type=str,
            default=None,
            help="Filename suffix of export files (defaults to .csv)",
            metavar="EXT",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show per-file processing details",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress everything except the ranking and errors",
        )
        _ = parser.add_argument(
            "--show-failures",
            action="store_true",
            help="List every file that could not be parsed",
        )
        _ = parser.add_argument(
            "--no-progress",
            action="store_true",
            help="Disable the progress bar",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            RankArgs: Processed command line arguments.

        Raises:
            SystemExit: If option validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        # Configuration warnings must already respect the console level.
        _ = setup_logger(console_level=log_level)
        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        try:
            jobs = resolve_jobs(parsed_args.jobs, configuration)
        except ValueError as exc:
            logger.error("%s", exc)
            sys.exit(1)

        return RankArgs(
            directory=Path(parsed_args.directory),
            jobs=jobs,
            extension=normalize_extension(parsed_args.extension, configuration),
            verbose=is_verbose,
            quiet=is_quiet,
            show_failures=bool(parsed_args.show_failures),
            show_progress=not (parsed_args.no_progress or is_quiet),
        )
