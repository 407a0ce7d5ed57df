# Where: playrank.features.ingestion.__init__
# What: Expose the ingestion pipeline, its building blocks and outcome types.
# Why: Provide a cohesive import surface for the application and UI layers.

from .usecases.ingestion_types import (
    AccumulatorClosedError,
    AccumulatorPoisonedError,
    DirectoryUnavailableError,
    IngestionEvent,
    IngestionReport,
    IngestionTask,
    PipelineState,
    PoolClosedError,
    TaskFailure,
    TaskOutcome,
    TaskSuccess,
)
from .usecases.accumulator import SharedAccumulator
from .usecases.record_parser import (
    FIELD_ALIASES,
    HeaderError,
    RecordParseError,
    RowError,
    parse_file,
    parse_records,
)
from .usecases.worker_pool import WorkerPool
from .usecases.pipeline import IngestionPipeline

__all__ = [
    "AccumulatorClosedError",
    "AccumulatorPoisonedError",
    "DirectoryUnavailableError",
    "FIELD_ALIASES",
    "HeaderError",
    "IngestionEvent",
    "IngestionPipeline",
    "IngestionReport",
    "IngestionTask",
    "PipelineState",
    "PoolClosedError",
    "RecordParseError",
    "RowError",
    "SharedAccumulator",
    "TaskFailure",
    "TaskOutcome",
    "TaskSuccess",
    "WorkerPool",
    "parse_file",
    "parse_records",
]
