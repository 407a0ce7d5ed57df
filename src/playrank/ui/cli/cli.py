"""Command line interface for playrank."""

import sys
from typing import final

from playrank.features.ingestion import DirectoryUnavailableError
from playrank.platform.logging import logger
from playrank.ui.cli.args import ArgumentParser
from playrank.ui.cli.args.options import CLIArgs
from playrank.ui.cli.commands import RankCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Files that fail to parse do not change the exit status; an unreadable
        input directory or a failed accumulator does.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            _ = RankCommand(args).execute()
            return

        except DirectoryUnavailableError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
