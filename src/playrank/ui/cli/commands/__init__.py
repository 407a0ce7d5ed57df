"""Command execution package for CLI."""

from playrank.ui.cli.commands.executor import CommandExecutor
from playrank.ui.cli.commands.rank import RankCommand

__all__ = ["CommandExecutor", "RankCommand"]
