"""Display management for CLI interface."""

from playrank.ui.cli.display.progress import ProgressDisplay
from playrank.ui.cli.display.ranking import RankingDisplay

__all__ = ["ProgressDisplay", "RankingDisplay"]
