"""Summary: Ports defining ingestion use case dependencies.
Why: Decouple the pipeline from concrete adapters so tests and swaps stay simple."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from playrank.shared.play_record import PlayRecord


@runtime_checkable
class DirectoryListerPort(Protocol):
    """Port for discovering the files a run should ingest."""

    def list_eligible_files(self, directory: Path, extension: str) -> list[Path]:
        """Return eligible files in submission order."""
        ...


class FileParserPort(Protocol):
    """Callable turning one file into a complete batch of records."""

    def __call__(self, path: Path) -> list[PlayRecord]:
        ...


__all__ = ["DirectoryListerPort", "FileParserPort"]
