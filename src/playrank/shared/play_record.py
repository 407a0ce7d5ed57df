# Where: playrank.shared.play_record
# What: Canonical PlayRecord and RankedEntry dataclasses shared across features.
# Why: Centralize the parsed listening entry so ingestion and ranking agree on it.

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PlayRecord:
    """One parsed row of a play-history export."""

    title: str
    album: str
    artist: str
    duration_ms: int
    rating: int
    play_count: int
    removed: str


@dataclass(frozen=True, slots=True)
class RankedEntry:
    """A record annotated with its 1-based position in the final ranking."""

    rank: int
    record: PlayRecord

    @property
    def play_count(self) -> int:
        return self.record.play_count

    def as_row(self) -> tuple[int, int, str, str, str]:
        """Return ``(rank, play_count, artist, title, album)`` for reporters."""

        record = self.record
        return (self.rank, record.play_count, record.artist, record.title, record.album)


__all__ = ["PlayRecord", "RankedEntry"]
