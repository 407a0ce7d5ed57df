"""Summary: Enumerate eligible export files in an input directory.
Why: Keep filesystem listing and its fatal error mapping outside the pipeline driver."""

from __future__ import annotations

import os
from pathlib import Path
from typing import final

from playrank.features.ingestion.usecases.ingestion_types import DirectoryUnavailableError


@final
class LocalDirectoryLister:
    """List regular files in one directory whose names end with an extension."""

    def list_eligible_files(self, directory: Path, extension: str) -> list[Path]:
        """Return eligible files sorted by name.

        Only the top level of ``directory`` is inspected. The extension match
        is case-insensitive.

        Raises:
            DirectoryUnavailableError: If ``directory`` cannot be opened or listed.
        """
        if not directory.exists():
            raise DirectoryUnavailableError(directory, "no such directory")
        if not directory.is_dir():
            raise DirectoryUnavailableError(directory, "not a directory")

        suffix = extension.lower()
        try:
            with os.scandir(directory) as entries:
                eligible = [
                    Path(entry.path)
                    for entry in entries
                    if entry.name.lower().endswith(suffix) and entry.is_file()
                ]
        except OSError as exc:
            raise DirectoryUnavailableError(directory, exc.strerror or str(exc)) from exc

        return sorted(eligible, key=lambda path: path.name)


__all__ = ["LocalDirectoryLister"]
