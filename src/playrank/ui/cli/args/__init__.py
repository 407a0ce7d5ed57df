"""Command line argument handling package."""

from playrank.ui.cli.args.parser import ArgumentParser
from playrank.ui.cli.args.options import CLIArgs, RankArgs

__all__ = ["ArgumentParser", "CLIArgs", "RankArgs"]
