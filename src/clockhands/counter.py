"""A mutex-guarded integer bumped by a fork-join pool of worker threads."""

from __future__ import annotations

import threading

from clockhands.utilities.logging import get_logger

logger = get_logger(__name__)


class SharedCounter:
    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    def get_value(self) -> int:
        with self._lock:
            return self._value

    def run_threads(self, thread_count: int) -> None:
        """Start ``thread_count`` workers that each increment once, then join them all."""

        if thread_count < 0:
            raise ValueError(f"thread_count must be non-negative, got {thread_count}")

        logger.info("Spawning %d counter workers", thread_count)
        workers = [
            threading.Thread(target=self.increment, name=f"counter-worker-{index}")
            for index in range(thread_count)
        ]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()
        logger.debug("All %d counter workers joined", thread_count)
