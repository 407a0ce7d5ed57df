"""src/playrank/features/ranking/usecases/aggregator.py
What: Filter, sort and rank the accumulated play records.
Why: Keep post-processing a pure function that runs once ingestion has drained.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from operator import attrgetter

from playrank.shared.play_record import PlayRecord, RankedEntry


@dataclass(frozen=True, slots=True)
class RankingSummary:
    """Ranked entries plus the counts reported to the user."""

    entries: tuple[RankedEntry, ...]
    total_accumulated: int
    total_retained: int

    def rows(self) -> list[tuple[int, int, str, str, str]]:
        """Return ``(rank, play_count, artist, title, album)`` tuples."""

        return [entry.as_row() for entry in self.entries]


def is_played(record: PlayRecord) -> bool:
    return record.play_count > 0


def aggregate(records: Sequence[PlayRecord]) -> RankingSummary:
    """Rank played records by play count, most played first.

    Records with equal play counts keep their relative input order.

    Args:
        records: Every record accumulated during ingestion.

    Returns:
        RankingSummary: Ranked entries and pre/post filter counts.
    """
    played = [record for record in records if is_played(record)]
    ordered = sorted(played, key=attrgetter("play_count"), reverse=True)
    entries = tuple(
        RankedEntry(rank=rank, record=record) for rank, record in enumerate(ordered, start=1)
    )
    return RankingSummary(
        entries=entries,
        total_accumulated=len(records),
        total_retained=len(entries),
    )


__all__ = ["RankingSummary", "aggregate", "is_played"]
