"""Tests for the shared accumulator."""

from __future__ import annotations

import threading

import pytest
from pytest_mock import MockerFixture

from playrank.features.ingestion import (
    AccumulatorClosedError,
    AccumulatorPoisonedError,
    SharedAccumulator,
)
from playrank.shared import PlayRecord


def _record(title: str, play_count: int = 1) -> PlayRecord:
    return PlayRecord(
        title=title,
        album="Album",
        artist="Artist",
        duration_ms=1000,
        rating=0,
        play_count=play_count,
        removed="",
    )


def test_into_records_orders_batches_by_task_sequence() -> None:
    accumulator = SharedAccumulator()
    _ = accumulator.append_batch(2, [_record("C")])
    _ = accumulator.append_batch(0, [_record("A1"), _record("A2")])
    _ = accumulator.append_batch(1, [])

    records = accumulator.into_records()

    assert [record.title for record in records] == ["A1", "A2", "C"]


def test_len_counts_published_records() -> None:
    accumulator = SharedAccumulator()
    assert accumulator.append_batch(0, [_record("A"), _record("B")]) == 2
    assert len(accumulator) == 2


def test_into_records_closes_the_accumulator() -> None:
    accumulator = SharedAccumulator()
    _ = accumulator.append_batch(0, [_record("A")])

    _ = accumulator.into_records()

    assert accumulator.closed
    with pytest.raises(AccumulatorClosedError):
        _ = accumulator.append_batch(1, [_record("B")])
    with pytest.raises(AccumulatorClosedError):
        _ = accumulator.into_records()


def test_duplicate_sequence_is_rejected_without_mutation() -> None:
    accumulator = SharedAccumulator()
    _ = accumulator.append_batch(0, [_record("A")])

    with pytest.raises(ValueError):
        _ = accumulator.append_batch(0, [_record("B")])

    assert [record.title for record in accumulator.into_records()] == ["A"]


def test_failed_commit_poisons_the_accumulator(mocker: MockerFixture) -> None:
    """A failure while the lock is held blocks further appends and the hand-over."""

    accumulator = SharedAccumulator()
    _ = accumulator.append_batch(0, [_record("A")])

    _ = mocker.patch.object(accumulator, "_commit", side_effect=MemoryError("boom"))
    with pytest.raises(AccumulatorPoisonedError, match="boom"):
        _ = accumulator.append_batch(1, [_record("B")])
    mocker.stopall()

    assert accumulator.poisoned
    with pytest.raises(AccumulatorPoisonedError):
        _ = accumulator.append_batch(2, [_record("C")])
    with pytest.raises(AccumulatorPoisonedError):
        _ = accumulator.into_records()


def test_concurrent_appends_are_atomic() -> None:
    """Batches from many threads all land whole; none interleave."""

    accumulator = SharedAccumulator()
    batch_sizes = [i % 7 + 1 for i in range(64)]
    barrier = threading.Barrier(len(batch_sizes))

    def _worker(sequence: int, size: int) -> None:
        batch = [_record(f"{sequence}-{index}") for index in range(size)]
        _ = barrier.wait()
        _ = accumulator.append_batch(sequence, batch)

    threads = [
        threading.Thread(target=_worker, args=(sequence, size))
        for sequence, size in enumerate(batch_sizes)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    records = accumulator.into_records()
    assert len(records) == sum(batch_sizes)

    expected: list[str] = [
        f"{sequence}-{index}"
        for sequence, size in enumerate(batch_sizes)
        for index in range(size)
    ]
    assert [record.title for record in records] == expected
