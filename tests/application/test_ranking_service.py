"""Tests for the ranking application service."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

from pytest_mock import MockerFixture

from playrank.application.services.ranking_service import RankPlaysService, RankRequest
from playrank.features.ingestion import IngestionReport


def test_run_ranks_directory(
    export_dir: Path,
    write_export: Callable[..., Path],
    make_row: Callable[..., list[str]],
) -> None:
    _ = write_export("one.csv", [make_row("A", 2), make_row("B", 7)])

    report = RankPlaysService().run(RankRequest(directory=export_dir, concurrency=2))

    assert [entry.record.title for entry in report.summary.entries] == ["B", "A"]
    assert report.concurrency == 2


def test_build_pipeline_passes_request_and_factories(mocker: MockerFixture) -> None:
    pipeline_factory = mocker.MagicMock()
    lister = mocker.MagicMock()
    parser = mocker.MagicMock()
    progress = mocker.MagicMock()

    service = RankPlaysService(
        lister_factory=lambda: lister,
        parser=parser,
        pipeline_factory=pipeline_factory,
    )
    request = RankRequest(directory=Path("exports"), concurrency=3, extension=".tsv")

    _ = service.build_pipeline(request, progress_callback=progress)

    pipeline_factory.assert_called_once_with(
        3,
        ".tsv",
        parser=parser,
        lister=lister,
        progress_callback=progress,
    )


def test_run_with_progress_forwards_reporter(mocker: MockerFixture) -> None:
    pipeline = MagicMock()
    report = MagicMock(spec=IngestionReport)
    pipeline.run.return_value = report
    service = RankPlaysService(pipeline_factory=lambda *args, **kwargs: pipeline)
    reporter = mocker.MagicMock()
    request = RankRequest(directory=Path("exports"))

    result = service.run_with_progress(request, mocker.MagicMock(), reporter)

    assert result is report
    pipeline.run.assert_called_once_with(Path("exports"), reporter)


def test_request_defaults() -> None:
    request = RankRequest(directory=Path("x"))

    assert request.concurrency == 8
    assert request.extension == ".csv"
