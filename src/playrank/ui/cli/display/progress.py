"""Progress display functionality for CLI."""

import threading
from pathlib import Path
from typing import Any, Callable, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import Progress, TaskID

from playrank.application.services.ranking_service import RankRequest
from playrank.features.ingestion import IngestionReport
from playrank.platform.logging import IngestionRichHandler, logger


@runtime_checkable
class RankServiceLike(Protocol):
    """Protocol for application services that can rank a directory with progress."""

    def run_with_progress(
        self,
        request: RankRequest,
        progress_callback: Callable[[int, int, Path], None],
    ) -> IngestionReport:
        ...


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(self, app: RankServiceLike, request: RankRequest) -> IngestionReport:
        """Run ingestion via the application service with a progress bar.

        Args:
            app: Application service instance used to orchestrate the run.
            request: Ranking parameters.

        Returns:
            IngestionReport: Report produced by the run.
        """
        progress_console: Console | None = None
        for handler in logger.handlers:
            if isinstance(handler, IngestionRichHandler):
                progress_console = handler.console
                break

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(**progress_kwargs) as progress:
            task_id: TaskID | None = None
            highest = 0
            lock = threading.Lock()

            def _cb(completed: int, total: int, current_file: Path) -> None:
                nonlocal task_id, highest
                _ = current_file  # consumed via logging elsewhere
                with lock:
                    if task_id is None:
                        task_id = progress.add_task("[cyan]Reading files...", total=total)
                    # Worker threads may report out of order.
                    highest = max(highest, completed)
                    finished = highest
                    progress.update(
                        task_id,
                        completed=finished,
                        description=f"[cyan]Reading files... {finished}/{total}",
                    )

            return app.run_with_progress(request, _cb)
