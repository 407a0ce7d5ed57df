"""
Summary: Root exception type for playrank failures.
Why: Let the CLI tell expected domain failures apart from programming errors.
"""

from __future__ import annotations


class PlayrankError(Exception):
    """Base class for errors raised by playrank itself."""


__all__ = ["PlayrankError"]
