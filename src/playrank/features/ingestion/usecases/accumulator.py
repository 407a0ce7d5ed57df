"""
Summary: Lock-guarded collection that workers publish parsed batches into.
Why: Give every task all-or-nothing visibility and an explicit single-owner hand-over.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from itertools import chain
from typing import Final

from playrank.shared.play_record import PlayRecord

from .ingestion_types import AccumulatorClosedError, AccumulatorPoisonedError


class SharedAccumulator:
    """Collect record batches from concurrent workers.

    Every batch is stored whole under the lock. Once ``into_records`` has been
    called the accumulator is closed and any remaining reference to it can no
    longer mutate it.
    """

    def __init__(self) -> None:
        self._lock: Final[threading.Lock] = threading.Lock()
        self._batches: dict[int, tuple[PlayRecord, ...]] | None = {}
        self._record_count: int = 0
        self._poison_cause: BaseException | None = None

    @property
    def poisoned(self) -> bool:
        return self._poison_cause is not None

    @property
    def closed(self) -> bool:
        return self._batches is None

    def __len__(self) -> int:
        with self._lock:
            return self._record_count

    def append_batch(self, sequence: int, records: Iterable[PlayRecord]) -> int:
        """Publish one task's records atomically.

        Args:
            sequence: Submission index of the task that produced the batch.
            records: Complete set of records parsed by that task.

        Returns:
            int: Number of records published.

        Raises:
            AccumulatorClosedError: If ownership was already handed over.
            AccumulatorPoisonedError: If an earlier append failed while holding the lock.
            ValueError: If a batch was already published for ``sequence``.
        """
        batch = tuple(records)

        with self._lock:
            if self._batches is None:
                raise AccumulatorClosedError("accumulator was handed over; no further appends")
            if self._poison_cause is not None:
                raise AccumulatorPoisonedError(
                    f"accumulator poisoned by an earlier failure: {self._poison_cause}"
                ) from self._poison_cause
            if sequence in self._batches:
                raise ValueError(f"batch for task #{sequence} was already published")
            try:
                self._commit(self._batches, sequence, batch)
            except Exception as exc:
                self._poison_cause = exc
                raise AccumulatorPoisonedError(
                    f"append for task #{sequence} failed while holding the lock: {exc}"
                ) from exc
        return len(batch)

    def _commit(
        self,
        batches: dict[int, tuple[PlayRecord, ...]],
        sequence: int,
        batch: tuple[PlayRecord, ...],
    ) -> None:
        batches[sequence] = batch
        self._record_count += len(batch)

    def into_records(self) -> tuple[PlayRecord, ...]:
        """Close the accumulator and return its records in task submission order.

        Raises:
            AccumulatorClosedError: If the records were already taken.
            AccumulatorPoisonedError: If the union can no longer be trusted.
        """
        with self._lock:
            batches = self._batches
            if batches is None:
                raise AccumulatorClosedError("accumulator records were already taken")
            self._batches = None
            if self._poison_cause is not None:
                raise AccumulatorPoisonedError(
                    f"accumulator poisoned: {self._poison_cause}"
                ) from self._poison_cause

        return tuple(chain.from_iterable(batches[key] for key in sorted(batches)))


__all__ = ["SharedAccumulator"]
