"""Shared pytest fixtures for export-file based tests."""

from __future__ import annotations

import csv
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

TAKEOUT_HEADER: tuple[str, ...] = (
    "Title",
    "Album",
    "Artist",
    "Duration (ms)",
    "Rating",
    "Play Count",
    "Removed",
)

ExportWriter = Callable[..., Path]


def export_row(
    title: str,
    play_count: int,
    *,
    album: str = "Album",
    artist: str = "Artist",
    duration_ms: int = 180000,
    rating: int = 0,
    removed: str = "",
) -> list[str]:
    """Build one takeout row in ``TAKEOUT_HEADER`` column order."""

    return [title, album, artist, str(duration_ms), str(rating), str(play_count), removed]


@pytest.fixture
def export_dir(tmp_path: Path) -> Path:
    """Provide an empty directory standing in for a takeout ``Tracks`` folder."""

    directory = tmp_path / "Tracks"
    directory.mkdir()
    return directory


@pytest.fixture
def write_export(export_dir: Path) -> ExportWriter:
    """Return a helper writing one CSV export file into ``export_dir``."""

    def _write(
        name: str,
        rows: Sequence[Sequence[str]],
        header: Sequence[str] = TAKEOUT_HEADER,
    ) -> Path:
        path = export_dir / name
        with path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle)
            writer.writerow(header)
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def make_row() -> Callable[..., list[str]]:
    """Return the ``export_row`` builder for use inside tests."""

    return export_row
