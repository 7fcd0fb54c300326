# src/linuxaudit/pooling/dispatcher.py
"""Bounded worker pool that parses lines in parallel and restores order.

Per batch:
- A feeder thread streams (index, line) pairs into a bounded work queue,
  then posts one stop sentinel per worker
- N workers (ThreadPoolExecutor) pull from the work queue, parse, and
  push LineOutcome objects into a bounded result queue
- A barrier thread waits for every worker future, then posts the
  end-of-stream sentinel on the result queue
- The collector (caller thread) writes each outcome into a pre-sized
  list at its original index

Results are produced in any order; the returned list is in input order.
Each slot is written exactly once by the collector, so no lock guards
the output list. Bounded queues give backpressure: a slow collector
stalls workers, which stall the feeder.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, wait
from threading import Lock
from typing import Any

from linuxaudit.contracts.records import LineOutcome, Record
from linuxaudit.core.logging import get_logger
from linuxaudit.pooling.config import PoolConfig

logger = get_logger(__name__)

# Sentinel closing the work queue (one per worker) and the result queue.
_END = object()

ParseFn = Callable[[str], Record]


class LineDispatcher:
    """Runs a parse function over a batch of lines with bounded parallelism.

    The dispatcher is synchronous from the caller's perspective -
    dispatch() blocks until every line has an outcome. There is no
    cancellation or timeout: a batch runs to completion.

    Usage:
        dispatcher = LineDispatcher(PoolConfig(pool_size=4))
        outcomes = dispatcher.dispatch(lines, tokenize)
        assert [o.index for o in outcomes] == list(range(len(lines)))
    """

    def __init__(self, config: PoolConfig) -> None:
        """Initialize dispatcher with pool configuration.

        Args:
            config: Pool configuration with the maximum worker count
        """
        self._config = config

        # Serializes dispatch() calls on the same instance
        self._batch_lock = Lock()

        # Concurrency tracking for the last batch
        self._stats_lock = Lock()
        self._active_workers: int = 0
        self._max_concurrent: int = 0
        self._workers_used: int = 0
        self._lines_dispatched: int = 0

    @property
    def pool_size(self) -> int:
        """Maximum worker count."""
        return self._config.pool_size

    def _increment_active_workers(self) -> None:
        with self._stats_lock:
            self._active_workers += 1
            if self._active_workers > self._max_concurrent:
                self._max_concurrent = self._active_workers

    def _decrement_active_workers(self) -> None:
        with self._stats_lock:
            self._active_workers -= 1

    def _reset_batch_stats(self, workers: int, lines: int) -> None:
        with self._stats_lock:
            self._max_concurrent = 0
            self._workers_used = workers
            self._lines_dispatched = lines

    def get_stats(self) -> dict[str, Any]:
        """Statistics of the most recent batch.

        Returns:
            Dict with pool_size, workers_used, lines_dispatched and
            max_concurrent_reached
        """
        with self._stats_lock:
            return {
                "pool_size": self._config.pool_size,
                "workers_used": self._workers_used,
                "lines_dispatched": self._lines_dispatched,
                "max_concurrent_reached": self._max_concurrent,
            }

    def dispatch(self, lines: Sequence[str], parse_fn: ParseFn) -> list[LineOutcome]:
        """Parse every line and return outcomes in input order.

        Each line is whitespace-trimmed before parsing; a line that is
        empty after trimming gets a blank outcome without calling
        parse_fn. Exceptions raised by parse_fn become that line's error.

        Args:
            lines: Ordered input lines
            parse_fn: Function turning one line into a record

        Returns:
            One LineOutcome per line, ordered by index

        Raises:
            RuntimeError: If the pool lost outcomes
        """
        if not lines:
            self._reset_batch_stats(workers=0, lines=0)
            return []

        with self._batch_lock:
            return self._dispatch_locked(lines, parse_fn)

    def _dispatch_locked(self, lines: Sequence[str], parse_fn: ParseFn) -> list[LineOutcome]:
        """Internal batch execution (must be called while holding _batch_lock)."""
        line_count = len(lines)
        worker_count = self._config.workers_for(line_count)
        self._reset_batch_stats(workers=worker_count, lines=line_count)

        work: queue.Queue[Any] = queue.Queue(maxsize=worker_count)
        results: queue.Queue[Any] = queue.Queue(maxsize=worker_count)

        def feed() -> None:
            for idx, line in enumerate(lines):
                work.put((idx, line))
            for _ in range(worker_count):
                work.put(_END)

        feeder = threading.Thread(target=feed, name="linuxaudit-feeder", daemon=True)
        feeder.start()

        slots: list[LineOutcome | None] = [None] * line_count
        with ThreadPoolExecutor(max_workers=worker_count, thread_name_prefix="linuxaudit-worker") as pool:
            futures = [pool.submit(self._work, work, results, parse_fn) for _ in range(worker_count)]

            def close_results() -> None:
                wait(futures)
                results.put(_END)

            barrier = threading.Thread(target=close_results, name="linuxaudit-barrier", daemon=True)
            barrier.start()

            while True:
                item = results.get()
                if item is _END:
                    break
                slots[item.index] = item

            barrier.join()
            # Surface worker crashes (failures outside parse_fn)
            for future in futures:
                future.result()

        feeder.join()

        outcomes = [slot for slot in slots if slot is not None]
        if len(outcomes) != line_count:
            raise RuntimeError(f"Pool returned {len(outcomes)} outcomes for {line_count} lines")

        logger.debug(
            "batch_dispatched",
            lines=line_count,
            workers=worker_count,
            max_concurrent=self.get_stats()["max_concurrent_reached"],
        )
        return outcomes

    def _work(
        self,
        work: queue.Queue[Any],
        results: queue.Queue[Any],
        parse_fn: ParseFn,
    ) -> None:
        """Worker loop: parse lines until the stop sentinel arrives."""
        while True:
            item = work.get()
            if item is _END:
                return
            idx, raw = item
            results.put(self._parse_one(idx, raw, parse_fn))

    def _parse_one(self, idx: int, raw: str, parse_fn: ParseFn) -> LineOutcome:
        line = raw.strip()
        if not line:
            return LineOutcome.blank(idx, line)

        self._increment_active_workers()
        try:
            return LineOutcome.success(idx, line, parse_fn(line))
        except Exception as e:
            logger.warning("line_parse_failed", index=idx, error=str(e), error_type=type(e).__name__)
            return LineOutcome.failure(idx, line, e)
        finally:
            self._decrement_active_workers()
