"""src/playrank/ui/cli/display/ranking.py
What: Render the ranked song list and the read/match totals.
Why: Keep console output formatting in one place for the CLI flow.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from playrank.features.ingestion import IngestionReport
from playrank.features.ranking import RankingSummary

from .summary import render_processing_summary


@final
class RankingDisplay:
    """Handles ranking output in CLI."""

    console: Console

    def __init__(self) -> None:
        self.console = Console()

    def show_banner(self, jobs: int, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print(f"using {jobs} threads", markup=False, highlight=False)

    def show_ranking(self, summary: RankingSummary) -> None:
        """Print one line per ranked entry followed by the totals.

        The totals are always printed so records lost to failed files show up
        as a lower than expected count.
        """
        for rank, play_count, artist, title, album in summary.rows():
            self.console.print(
                f"#{rank}, (play count {play_count}): {artist} - {title} ({album})",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )

        self.console.print(
            f"done reading {summary.total_accumulated} songs, "
            f"found {summary.total_retained} matches",
            markup=False,
            highlight=False,
        )

    def show_report(
        self,
        report: IngestionReport,
        *,
        quiet: bool = False,
        show_failures: bool = False,
    ) -> None:
        """Display the ranking and, unless quiet, the per-file summary.

        Args:
            report: Report produced by the ingestion pipeline.
            quiet: Whether to suppress everything except the ranking.
            show_failures: Whether to list every failed file.
        """
        self.show_ranking(report.summary)
        if quiet:
            return

        render_processing_summary(
            console=self.console,
            report=report,
            header_label="Processing Summary",
            total_label="Files read",
            success_label="Parsed",
            failure_label="Failed",
            list_failures=show_failures,
        )
