"""src/playrank/features/ingestion/usecases/ingestion_types.py
Where: Ingestion feature usecases layer.
What: Shared enums, dataclasses and errors for the ingestion flow.
Why: Keep the pipeline driver lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from playrank.shared.errors import PlayrankError
from playrank.features.ranking.usecases.aggregator import RankingSummary


class IngestionEvent(StrEnum):
    """Structured event identifiers for ingestion logs."""

    DIRECTORY_START = "ingestion.directory.start"
    DIRECTORY_COMPLETE = "ingestion.directory.complete"
    DIRECTORY_ERROR = "ingestion.directory.error"
    DIRECTORY_NO_FILES = "ingestion.directory.no_files"
    FILE_SUCCESS = "ingestion.file.success"
    FILE_ERROR = "ingestion.file.error"
    ACCUMULATOR_POISONED = "ingestion.accumulator.poisoned"


class PipelineState(StrEnum):
    """Lifecycle states of the ingestion pipeline driver."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    DRAINING = "draining"
    AGGREGATING = "aggregating"
    REPORTED = "reported"


class DirectoryUnavailableError(PlayrankError):
    """Raised when the input directory cannot be opened or listed."""

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"Cannot read input directory {directory}: {reason}")
        self.directory: Path = directory
        self.reason: str = reason


class AccumulatorPoisonedError(PlayrankError):
    """Raised when the shared accumulator can no longer guarantee a complete union."""


class AccumulatorClosedError(PlayrankError):
    """Raised when the accumulator is written after ownership was handed over."""


class PoolClosedError(PlayrankError):
    """Raised when a task is submitted to a drained worker pool."""


@dataclass(frozen=True, slots=True)
class IngestionTask:
    """Unit of work bound to exactly one input file."""

    path: Path
    sequence: int


@dataclass(frozen=True, slots=True)
class TaskSuccess:
    """A task that parsed its file and published every record."""

    task: IngestionTask
    record_count: int

    @property
    def succeeded(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class TaskFailure:
    """A task that contributed no records.

    ``systemic`` marks failures of the accumulator itself rather than of the
    input file; those abort the run once the pool has drained.
    """

    task: IngestionTask
    error_message: str
    systemic: bool = False

    @property
    def succeeded(self) -> bool:
        return False


TaskOutcome = TaskSuccess | TaskFailure


@dataclass(frozen=True, slots=True)
class IngestionReport:
    """Outcome of one pipeline run, handed to reporters."""

    directory: Path
    concurrency: int
    process_id: str
    summary: RankingSummary
    outcomes: tuple[TaskOutcome, ...]
    duration_seconds: float

    @property
    def failures(self) -> list[TaskFailure]:
        return [outcome for outcome in self.outcomes if isinstance(outcome, TaskFailure)]

    @property
    def succeeded_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)


@dataclass(slots=True)
class IngestionLogContext:
    """Mutable bookkeeping for a pipeline run."""

    process_id: str
    directory: Path
    total_files: int
    concurrency: int
    start_time: float = field(default_factory=time.perf_counter)
    succeeded: int = 0
    failed: int = 0

    def record_outcome(self, outcome: TaskOutcome) -> None:
        if outcome.succeeded:
            self.succeeded += 1
        else:
            self.failed += 1

    def duration_seconds(self) -> float:
        """Return the elapsed run time in seconds."""

        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "process_id": self.process_id,
            "directory": str(self.directory),
            "total_files": self.total_files,
            "concurrency": self.concurrency,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = [
    "AccumulatorClosedError",
    "AccumulatorPoisonedError",
    "DirectoryUnavailableError",
    "IngestionEvent",
    "IngestionLogContext",
    "IngestionReport",
    "IngestionTask",
    "PipelineState",
    "PoolClosedError",
    "TaskFailure",
    "TaskOutcome",
    "TaskSuccess",
]
