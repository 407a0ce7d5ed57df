"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class RankArgs:
    """Command line arguments for a ranking run."""

    directory: Path
    jobs: int
    extension: str
    verbose: bool
    quiet: bool
    show_failures: bool
    show_progress: bool


CLIArgs = RankArgs

__all__ = ["CLIArgs", "RankArgs"]
