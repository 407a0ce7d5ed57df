"""Command line interface package."""

from playrank.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
