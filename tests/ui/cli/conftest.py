"""Shared fixtures for CLI presentation tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from playrank.features.ingestion import IngestionReport, IngestionTask, TaskFailure, TaskSuccess
from playrank.features.ranking import aggregate
from playrank.shared import PlayRecord


def _record(title: str, artist: str, album: str, play_count: int) -> PlayRecord:
    return PlayRecord(
        title=title,
        album=album,
        artist=artist,
        duration_ms=1000,
        rating=0,
        play_count=play_count,
        removed="",
    )


@pytest.fixture
def build_report() -> Callable[..., IngestionReport]:
    """Return a factory for reports over a small fixed set of records."""

    def _build(failed_files: Sequence[str] = ()) -> IngestionReport:
        records = [
            _record("Song A", "Artist A", "Album A", 5),
            _record("Song B", "Artist B", "Album B", 0),
            _record("Song [C]", "Artist C", "Album C", 9),
        ]
        outcomes: list[TaskSuccess | TaskFailure] = [
            TaskSuccess(task=IngestionTask(path=Path("Tracks/ok.csv"), sequence=0), record_count=3)
        ]
        for offset, name in enumerate(failed_files, start=1):
            outcomes.append(
                TaskFailure(
                    task=IngestionTask(path=Path("Tracks") / name, sequence=offset),
                    error_message="line 2: invalid play_count value 'x'",
                )
            )
        return IngestionReport(
            directory=Path("Tracks"),
            concurrency=2,
            process_id="test",
            summary=aggregate(records),
            outcomes=tuple(outcomes),
            duration_seconds=0.1,
        )

    return _build
