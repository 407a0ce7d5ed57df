"""
Summary: Parse one play-history CSV export into PlayRecord values.
Why: Keep header aliasing and per-row validation in one explicit place.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Final

from playrank.shared.errors import PlayrankError
from playrank.shared.play_record import PlayRecord

U32_MAX: Final[int] = 2**32 - 1
U64_MAX: Final[int] = 2**64 - 1

# Canonical field name -> header spellings accepted for it.
FIELD_ALIASES: Final[Mapping[str, tuple[str, ...]]] = {
    "title": ("Title",),
    "album": ("Album",),
    "artist": ("Artist",),
    "duration_ms": ("DurationMs", "Duration (ms)"),
    "rating": ("Rating",),
    "play_count": ("PlayCount", "Play Count"),
    "removed": ("Removed",),
}

_UNSIGNED_LIMITS: Final[Mapping[str, int]] = {
    "duration_ms": U64_MAX,
    "rating": U32_MAX,
    "play_count": U64_MAX,
}

# Longest digit string that can still fit the widest limit.
_MAX_DIGITS: Final[int] = len(str(U64_MAX))


class RecordParseError(PlayrankError):
    """Base class for errors raised while parsing an export file."""


class HeaderError(RecordParseError):
    """Raised when the header row cannot be mapped onto PlayRecord fields."""


class RowError(RecordParseError):
    """Raised when a data row is malformed."""

    def __init__(self, line: int, message: str) -> None:
        super().__init__(f"line {line}: {message}")
        self.line: int = line


@dataclass(frozen=True, slots=True)
class HeaderMap:
    """Column index for every PlayRecord field, resolved from a header row."""

    columns: Mapping[str, int]
    width: int

    @classmethod
    def resolve(
        cls,
        header: Sequence[str],
        aliases: Mapping[str, tuple[str, ...]] = FIELD_ALIASES,
    ) -> "HeaderMap":
        """Map header cells onto fields using ``aliases``.

        Raises:
            HeaderError: If a field is missing or matched by more than one column.
        """
        spelling_to_field = {
            spelling: field_name
            for field_name, spellings in aliases.items()
            for spelling in spellings
        }

        columns: dict[str, int] = {}
        for index, cell in enumerate(header):
            field_name = spelling_to_field.get(cell)
            if field_name is None:
                continue
            if field_name in columns:
                raise HeaderError(
                    f"duplicate column for field '{field_name}': '{header[columns[field_name]]}' and '{cell}'"
                )
            columns[field_name] = index

        missing = [field_name for field_name in aliases if field_name not in columns]
        if missing:
            expected = ", ".join(" / ".join(aliases[name]) for name in missing)
            raise HeaderError(f"missing required column(s): {expected}")

        return cls(columns=columns, width=len(header))

    def build(self, row: Sequence[str], line: int) -> PlayRecord:
        """Convert one data row into a ``PlayRecord``."""

        if len(row) != self.width:
            raise RowError(line, f"expected {self.width} fields, found {len(row)}")

        values = {name: row[index] for name, index in self.columns.items()}
        return PlayRecord(
            title=values["title"],
            album=values["album"],
            artist=values["artist"],
            duration_ms=_parse_unsigned(values["duration_ms"], "duration_ms", line),
            rating=_parse_unsigned(values["rating"], "rating", line),
            play_count=_parse_unsigned(values["play_count"], "play_count", line),
            removed=values["removed"],
        )


def _parse_unsigned(value: str, field_name: str, line: int) -> int:
    if not value or not (value.isascii() and value.isdigit()):
        raise RowError(line, f"invalid {field_name} value {value!r}")
    significant = value.lstrip("0")
    if len(significant) > _MAX_DIGITS:
        raise RowError(line, f"{field_name} value has {len(significant)} digits and is out of range")
    number = int(value)
    if number > _UNSIGNED_LIMITS[field_name]:
        raise RowError(line, f"{field_name} value {value} is out of range")
    return number


def parse_records(stream: BinaryIO) -> Iterator[PlayRecord]:
    """Yield records from one export file lazily.

    The first row is the header. Parsing stops at the first malformed row,
    so consumers that need all-or-nothing semantics must materialise the
    sequence before publishing it.

    Args:
        stream: Readable binary stream positioned at the start of the file.

    Yields:
        PlayRecord: One record per data row, in file order.

    Raises:
        HeaderError: If the header cannot be mapped.
        RowError: On the first malformed data row.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    text = io.TextIOWrapper(stream, encoding="utf-8-sig", newline="")
    try:
        reader = csv.reader(text, strict=True)
        try:
            header = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise HeaderError(f"unreadable header row: {exc}") from exc
        header_map = HeaderMap.resolve(header)

        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except csv.Error as exc:
                raise RowError(reader.line_num, str(exc)) from exc
            if not row:
                continue
            yield header_map.build(row, reader.line_num)
    finally:
        _ = text.detach()


def parse_file(path: Path) -> list[PlayRecord]:
    """Parse a whole export file into a complete batch of records."""

    with path.open("rb") as handle:
        return list(parse_records(handle))


__all__ = [
    "FIELD_ALIASES",
    "HeaderError",
    "HeaderMap",
    "RecordParseError",
    "RowError",
    "parse_file",
    "parse_records",
]
