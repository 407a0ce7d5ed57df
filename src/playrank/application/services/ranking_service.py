"""Application service for ranking play history exports.

This layer centralizes construction of the ingestion pipeline so that
multiple UIs (CLI, tests, scripts) can reuse the same use case.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from playrank.config.settings import DEFAULT_EXTENSION, DEFAULT_JOBS
from playrank.features.ingestion import IngestionPipeline, IngestionReport
from playrank.features.ingestion.adapters import LocalDirectoryLister
from playrank.features.ingestion.usecases.pipeline import ProgressCallback, Reporter
from playrank.features.ingestion.usecases.ports import DirectoryListerPort, FileParserPort
from playrank.features.ingestion.usecases.record_parser import parse_file


@dataclass(frozen=True)
class RankRequest:
    """Input parameters for a ranking run.

    Attributes:
        directory: Directory holding the export files.
        concurrency: Number of worker threads, fixed for the run.
        extension: Filename suffix marking eligible files.
    """

    directory: Path
    concurrency: int = DEFAULT_JOBS
    extension: str = DEFAULT_EXTENSION


@final
class RankPlaysService:
    """Application service that builds and runs the ingestion pipeline."""

    def __init__(
        self,
        *,
        lister_factory: Callable[[], DirectoryListerPort] | None = None,
        parser: FileParserPort | None = None,
        pipeline_factory: Callable[..., IngestionPipeline] | None = None,
    ) -> None:
        """Create a service with overridable infrastructure factories.

        Tests can inject light-weight doubles while production code relies on
        the default filesystem adapter and CSV parser.
        """

        self._lister_factory: Callable[[], DirectoryListerPort] = (
            lister_factory or LocalDirectoryLister
        )
        self._parser: FileParserPort = parser or parse_file
        self._pipeline_factory: Callable[..., IngestionPipeline] = (
            pipeline_factory or IngestionPipeline
        )

    def build_pipeline(
        self,
        request: RankRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> IngestionPipeline:
        """Build an ``IngestionPipeline`` configured from the request."""

        return self._pipeline_factory(
            request.concurrency,
            request.extension,
            parser=self._parser,
            lister=self._lister_factory(),
            progress_callback=progress_callback,
        )

    def run(
        self,
        request: RankRequest,
        reporter: Reporter | None = None,
    ) -> IngestionReport:
        """Run ingestion and ranking without progress reporting."""

        return self.build_pipeline(request).run(request.directory, reporter)

    def run_with_progress(
        self,
        request: RankRequest,
        progress_callback: ProgressCallback,
        reporter: Reporter | None = None,
    ) -> IngestionReport:
        """Run ingestion and ranking, reporting each finished file.

        Args:
            request: Ranking parameters.
            progress_callback: Called with ``(completed, total, path)`` from worker threads.
            reporter: Optional callable receiving the finished report.
        """

        pipeline = self.build_pipeline(request, progress_callback=progress_callback)
        return pipeline.run(request.directory, reporter)


__all__ = ["RankPlaysService", "RankRequest"]
