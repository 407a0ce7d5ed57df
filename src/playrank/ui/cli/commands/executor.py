"""src/playrank/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse orchestration and presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from playrank.application.services.ranking_service import RankPlaysService, RankRequest
from playrank.features.ingestion import IngestionReport
from playrank.ui.cli.args.options import RankArgs
from playrank.ui.cli.display.progress import ProgressDisplay
from playrank.ui.cli.display.ranking import RankingDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: RankArgs
    app: RankPlaysService
    request: RankRequest
    progress_display: ProgressDisplay
    ranking_display: RankingDisplay

    def __init__(self, args: RankArgs) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.app = RankPlaysService()
        self.request = RankRequest(
            directory=args.directory,
            concurrency=args.jobs,
            extension=args.extension,
        )
        self.progress_display = ProgressDisplay()
        self.ranking_display = RankingDisplay()

    @abstractmethod
    def execute(self) -> IngestionReport:
        """Execute the command.

        Returns:
            Report produced by the run.
        """
        pass

    def display_report(self, report: IngestionReport) -> None:
        self.ranking_display.show_report(
            report,
            quiet=self.args.quiet,
            show_failures=self.args.show_failures,
        )
