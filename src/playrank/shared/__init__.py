# Where: playrank.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of shared types across features.

"""Shared cross-cutting types exposed at the package level."""

from .errors import PlayrankError
from .play_record import PlayRecord, RankedEntry

__all__ = ["PlayRecord", "PlayrankError", "RankedEntry"]
