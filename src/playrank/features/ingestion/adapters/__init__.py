"""Filesystem adapters for ingestion."""

from .filesystem_adapter import LocalDirectoryLister

__all__ = ["LocalDirectoryLister"]
