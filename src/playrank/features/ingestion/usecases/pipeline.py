"""src/playrank/features/ingestion/usecases/pipeline.py
What: Drive one ingestion run from directory listing to ranked report.
Why: Own the state machine and the accumulator hand-over in a single place.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from pathlib import Path

from playrank.features.ingestion.adapters.filesystem_adapter import LocalDirectoryLister
from playrank.features.ranking.usecases.aggregator import aggregate
from playrank.platform.logging import logger

from .accumulator import SharedAccumulator
from .ingestion_types import (
    AccumulatorPoisonedError,
    DirectoryUnavailableError,
    IngestionEvent,
    IngestionLogContext,
    IngestionReport,
    IngestionTask,
    PipelineState,
    TaskFailure,
    TaskOutcome,
    TaskSuccess,
)
from .ports import DirectoryListerPort, FileParserPort
from .record_parser import RecordParseError, parse_file
from .worker_pool import WorkerPool

ProgressCallback = Callable[[int, int, Path], None]
Reporter = Callable[[IngestionReport], None]

# Failures scoped to a single file; anything else escapes the task as a bug.
TASK_ERRORS: tuple[type[Exception], ...] = (RecordParseError, OSError, UnicodeDecodeError)


class IngestionPipeline:
    """Parse every eligible file concurrently, then rank the merged records."""

    def __init__(
        self,
        concurrency: int,
        extension: str = ".csv",
        *,
        parser: FileParserPort = parse_file,
        lister: DirectoryListerPort | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        if isinstance(concurrency, bool) or not isinstance(concurrency, int) or concurrency < 1:
            raise ValueError(f"concurrency must be a positive integer; received {concurrency!r}")
        self.concurrency: int = concurrency
        self.extension: str = extension
        self._parser: FileParserPort = parser
        self._lister: DirectoryListerPort = lister or LocalDirectoryLister()
        self._progress_callback: ProgressCallback | None = progress_callback
        self.state: PipelineState = PipelineState.IDLE

    def _transition(self, state: PipelineState) -> None:
        logger.debug("Pipeline state %s -> %s", self.state, state)
        self.state = state

    def run(self, directory: Path, reporter: Reporter | None = None) -> IngestionReport:
        """Execute a full run over ``directory``.

        Args:
            directory: Directory holding the export files.
            reporter: Optional callable receiving the finished report.

        Returns:
            IngestionReport: Ranked summary and per-task outcomes.

        Raises:
            DirectoryUnavailableError: If the directory cannot be listed; no task is submitted.
            AccumulatorPoisonedError: If the shared accumulator failed during ingestion.
        """
        if self.state is not PipelineState.IDLE:
            raise RuntimeError(f"pipeline is already running (state={self.state})")

        process_id = uuid.uuid4().hex[:12]
        try:
            files = self._list_files(directory, process_id)
            report = self._ingest_and_rank(directory, files, process_id)
            self._transition(PipelineState.REPORTED)
            if reporter is not None:
                reporter(report)
            return report
        finally:
            self._transition(PipelineState.IDLE)

    def _list_files(self, directory: Path, process_id: str) -> list[Path]:
        try:
            files = self._lister.list_eligible_files(directory, self.extension)
        except DirectoryUnavailableError as exc:
            logger.error(
                "Input directory unavailable [id=%s, path=%s, error=%s]",
                process_id,
                directory,
                exc.reason,
                extra={
                    "ingestion_event": IngestionEvent.DIRECTORY_ERROR,
                    "directory": str(directory),
                    "error_message": exc.reason,
                },
            )
            raise

        if not files:
            logger.warning(
                "No %s files found [id=%s, path=%s]",
                self.extension,
                process_id,
                directory,
                extra={
                    "ingestion_event": IngestionEvent.DIRECTORY_NO_FILES,
                    "directory": str(directory),
                },
            )
        return files

    def _ingest_and_rank(
        self,
        directory: Path,
        files: list[Path],
        process_id: str,
    ) -> IngestionReport:
        stats = IngestionLogContext(
            process_id=process_id,
            directory=directory,
            total_files=len(files),
            concurrency=self.concurrency,
        )
        logger.info(
            "Ingestion started [id=%s, files=%d, jobs=%d, path=%s]",
            process_id,
            len(files),
            self.concurrency,
            directory,
            extra={"ingestion_event": IngestionEvent.DIRECTORY_START, **stats.summary_extra()},
        )

        accumulator = SharedAccumulator()
        total_files = len(files)

        def _handle(task: IngestionTask) -> TaskOutcome:
            return self._run_task(task, accumulator, directory, total_files)

        def _on_complete(outcome: TaskOutcome, completed: int, _submitted: int) -> None:
            if self._progress_callback is not None:
                self._progress_callback(completed, total_files, outcome.task.path)

        pool = WorkerPool(self.concurrency, _handle, on_complete=_on_complete)

        self._transition(PipelineState.SUBMITTING)
        for sequence, path in enumerate(files):
            pool.submit(IngestionTask(path=path, sequence=sequence))

        self._transition(PipelineState.DRAINING)
        outcomes = pool.drain()
        for outcome in outcomes:
            stats.record_outcome(outcome)

        # Workers are gone; closing the accumulator leaves this frame the sole owner.
        records = accumulator.into_records()

        self._transition(PipelineState.AGGREGATING)
        summary = aggregate(records)

        logger.info(
            "Ingestion completed [id=%s, succeeded=%d, failed=%d, accumulated=%d, retained=%d]",
            process_id,
            stats.succeeded,
            stats.failed,
            summary.total_accumulated,
            summary.total_retained,
            extra={
                "ingestion_event": IngestionEvent.DIRECTORY_COMPLETE,
                "accumulated": summary.total_accumulated,
                "retained": summary.total_retained,
                **stats.summary_extra(),
            },
        )

        return IngestionReport(
            directory=directory,
            concurrency=self.concurrency,
            process_id=process_id,
            summary=summary,
            outcomes=tuple(outcomes),
            duration_seconds=stats.duration_seconds(),
        )

    def _run_task(
        self,
        task: IngestionTask,
        accumulator: SharedAccumulator,
        directory: Path,
        total_files: int,
    ) -> TaskOutcome:
        log_extra: dict[str, object] = {
            "sequence": task.sequence,
            "total_files": total_files,
            "source_path": str(task.path),
            "source_base_path": str(directory),
        }

        try:
            records = self._parser(task.path)
        except TASK_ERRORS as exc:
            error_message = str(exc) or type(exc).__name__
            logger.warning(
                "Failed to parse %s: %s",
                task.path.name,
                error_message,
                extra={
                    "ingestion_event": IngestionEvent.FILE_ERROR,
                    "error_message": error_message,
                    **log_extra,
                },
            )
            return TaskFailure(task=task, error_message=error_message)

        try:
            count = accumulator.append_batch(task.sequence, records)
        except AccumulatorPoisonedError as exc:
            logger.error(
                "Shared accumulator unavailable for %s: %s",
                task.path.name,
                exc,
                extra={
                    "ingestion_event": IngestionEvent.ACCUMULATOR_POISONED,
                    "error_message": str(exc),
                    **log_extra,
                },
            )
            return TaskFailure(task=task, error_message=str(exc), systemic=True)

        logger.debug(
            "Parsed %s (%d records)",
            task.path.name,
            count,
            extra={
                "ingestion_event": IngestionEvent.FILE_SUCCESS,
                "record_count": count,
                **log_extra,
            },
        )
        return TaskSuccess(task=task, record_count=count)


__all__ = ["IngestionPipeline", "ProgressCallback", "Reporter", "TASK_ERRORS"]
