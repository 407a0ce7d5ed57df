"""src/playrank/ui/cli/commands/rank.py
What: Execute ranking runs for an export directory via the CLI.
Why: Bridge parsed arguments with the application service and displays.
"""

from typing import override

from playrank.features.ingestion import IngestionReport
from playrank.ui.cli.commands.executor import CommandExecutor


class RankCommand(CommandExecutor):
    """Command for ranking the songs of one export directory."""

    @override
    def execute(self) -> IngestionReport:
        """Execute the ranking command.

        Returns:
            Report produced by the run.
        """
        self.ranking_display.show_banner(self.args.jobs, quiet=self.args.quiet)

        if self.args.show_progress:
            report = self.progress_display.run_with_service(self.app, self.request)
        else:
            report = self.app.run(self.request)

        self.display_report(report)
        return report
