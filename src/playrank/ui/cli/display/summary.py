"""Utilities for rendering shared CLI display content."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from playrank.features.ingestion import IngestionReport


def render_processing_summary(
    console: Console,
    report: IngestionReport,
    header_label: str,
    total_label: str,
    success_label: str,
    failure_label: str,
    *,
    list_failures: bool = True,
) -> None:
    """Render a formatted summary of per-file outcomes.

    Args:
        console: Rich console instance used to render output.
        report: Report produced by the ingestion pipeline.
        header_label: Label rendered in the summary header.
        total_label: Label describing the count of files read.
        success_label: Label describing the count of parsed files.
        failure_label: Label describing the count of failed files.
        list_failures: Whether to print one line per failed file.
    """
    failures = report.failures
    total_count = len(report.outcomes)

    console.print(f"\n[bold]{header_label}:[/bold]")
    console.print(f"{total_label}: {total_count}")
    console.print(f"[green]{success_label}: {report.succeeded_count}[/green]")

    if not failures:
        return

    console.print(f"[red]{failure_label}: {len(failures)}[/red]")
    if not list_failures:
        return
    for failure in failures:
        console.print(
            f"[red]  • {escape(str(failure.task.path))}: {escape(failure.error_message)}[/red]"
        )
