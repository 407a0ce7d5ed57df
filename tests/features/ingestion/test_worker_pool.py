"""Tests for the bounded worker pool."""

from __future__ import annotations

import threading
import time
from pathlib import Path

import pytest

from playrank.features.ingestion import (
    IngestionTask,
    PoolClosedError,
    TaskFailure,
    TaskOutcome,
    TaskSuccess,
    WorkerPool,
)


def _task(sequence: int) -> IngestionTask:
    return IngestionTask(path=Path(f"file{sequence}.csv"), sequence=sequence)


@pytest.mark.parametrize("concurrency", [0, -1, True, 1.5])
def test_rejects_invalid_concurrency(concurrency: object) -> None:
    with pytest.raises(ValueError):
        _ = WorkerPool(concurrency, lambda task: TaskSuccess(task, 0))  # type: ignore[arg-type]


def test_drain_returns_outcomes_in_submission_order() -> None:
    def _handler(task: IngestionTask) -> TaskOutcome:
        # Later tasks finish first.
        time.sleep(0.01 * (5 - task.sequence))
        return TaskSuccess(task=task, record_count=task.sequence)

    pool = WorkerPool(4, _handler)
    for sequence in range(5):
        pool.submit(_task(sequence))

    outcomes = pool.drain()

    assert [outcome.task.sequence for outcome in outcomes] == [0, 1, 2, 3, 4]


def test_never_exceeds_concurrency_limit() -> None:
    lock = threading.Lock()
    running = 0
    peak = 0

    def _handler(task: IngestionTask) -> TaskOutcome:
        nonlocal running, peak
        with lock:
            running += 1
            peak = max(peak, running)
        time.sleep(0.02)
        with lock:
            running -= 1
        return TaskSuccess(task=task, record_count=0)

    pool = WorkerPool(3, _handler)
    for sequence in range(12):
        pool.submit(_task(sequence))
    outcomes = pool.drain()

    assert len(outcomes) == 12
    assert 1 <= peak <= 3


def test_handler_exception_becomes_failure_without_affecting_siblings() -> None:
    def _handler(task: IngestionTask) -> TaskOutcome:
        if task.sequence == 1:
            raise RuntimeError("worker crashed")
        return TaskSuccess(task=task, record_count=1)

    pool = WorkerPool(2, _handler)
    for sequence in range(3):
        pool.submit(_task(sequence))
    outcomes = pool.drain()

    assert isinstance(outcomes[1], TaskFailure)
    assert outcomes[1].error_message == "worker crashed"
    assert all(isinstance(outcomes[index], TaskSuccess) for index in (0, 2))


def test_submit_after_drain_is_rejected() -> None:
    pool = WorkerPool(1, lambda task: TaskSuccess(task, 0))
    pool.submit(_task(0))
    _ = pool.drain()

    assert pool.closed
    with pytest.raises(PoolClosedError):
        pool.submit(_task(1))


def test_drain_without_tasks_returns_empty_list() -> None:
    pool = WorkerPool(2, lambda task: TaskSuccess(task, 0))
    assert pool.drain() == []


def test_on_complete_is_called_once_per_task() -> None:
    seen: list[tuple[int, int]] = []
    lock = threading.Lock()

    def _on_complete(outcome: TaskOutcome, completed: int, total: int) -> None:
        _ = total
        with lock:
            seen.append((outcome.task.sequence, completed))

    pool = WorkerPool(2, lambda task: TaskSuccess(task, 0), on_complete=_on_complete)
    for sequence in range(4):
        pool.submit(_task(sequence))
    _ = pool.drain()

    assert sorted(sequence for sequence, _ in seen) == [0, 1, 2, 3]
    assert sorted(completed for _, completed in seen) == [1, 2, 3, 4]
