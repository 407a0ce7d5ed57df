"""Bounded worker pool for ingestion tasks.

Where: src/playrank/features/ingestion/usecases/worker_pool.py
What: Run ingestion tasks on a fixed number of threads and wait for them all.
Why: Isolate executor lifecycle and per-task error capture from the pipeline driver.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Final

from playrank.config.settings import WORKER_THREAD_PREFIX
from playrank.platform.logging import logger

from .ingestion_types import IngestionTask, PoolClosedError, TaskFailure, TaskOutcome

TaskHandler = Callable[[IngestionTask], TaskOutcome]
CompletionCallback = Callable[[TaskOutcome, int, int], None]


class WorkerPool:
    """Execute submitted tasks with at most ``concurrency`` running at once."""

    def __init__(
        self,
        concurrency: int,
        handler: TaskHandler,
        *,
        on_complete: CompletionCallback | None = None,
        thread_name_prefix: str = WORKER_THREAD_PREFIX,
    ) -> None:
        if isinstance(concurrency, bool) or not isinstance(concurrency, int) or concurrency < 1:
            raise ValueError(f"concurrency must be a positive integer; received {concurrency!r}")

        self.concurrency: Final[int] = concurrency
        self._handler: TaskHandler = handler
        self._on_complete: CompletionCallback | None = on_complete
        self._executor: ThreadPoolExecutor = ThreadPoolExecutor(
            max_workers=concurrency,
            thread_name_prefix=thread_name_prefix,
        )
        self._futures: list[Future[TaskOutcome]] = []
        self._state_lock: Final[threading.Lock] = threading.Lock()
        self._completed: int = 0
        self._closed: bool = False

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, task: IngestionTask) -> None:
        """Queue ``task``; it starts as soon as a worker is free.

        Raises:
            PoolClosedError: If the pool has already been drained.
        """
        with self._state_lock:
            if self._closed:
                raise PoolClosedError(f"cannot submit {task.path}: worker pool already drained")
            future = self._executor.submit(self._run, task)
            self._futures.append(future)

    def drain(self) -> list[TaskOutcome]:
        """Block until every submitted task finished and shut the workers down.

        Returns:
            list[TaskOutcome]: One outcome per task, in submission order.
        """
        with self._state_lock:
            self._closed = True
            futures = list(self._futures)

        _ = wait(futures)
        self._executor.shutdown(wait=True)
        return [future.result() for future in futures]

    def _run(self, task: IngestionTask) -> TaskOutcome:
        try:
            outcome = self._handler(task)
        except Exception as exc:
            logger.exception("Unhandled error in ingestion task for %s", task.path)
            outcome = TaskFailure(task=task, error_message=str(exc) or type(exc).__name__)

        if self._on_complete is not None:
            with self._state_lock:
                self._completed += 1
                completed = self._completed
                total = len(self._futures)
            try:
                self._on_complete(outcome, completed, total)
            except Exception:
                logger.exception("Progress callback failed for %s", task.path)
        return outcome


__all__ = ["CompletionCallback", "TaskHandler", "WorkerPool"]
