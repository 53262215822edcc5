"""Tests for :mod:`clockhands.counter`."""

from __future__ import annotations

import threading

import pytest

from clockhands.counter import SharedCounter


class TestSharedCounter:
    def test_starts_at_zero(self) -> None:
        assert SharedCounter().get_value() == 0

    @pytest.mark.parametrize("thread_count", [0, 1, 5, 10, 100_000])
    def test_every_worker_increment_is_counted(self, thread_count: int) -> None:
        counter = SharedCounter()
        counter.run_threads(thread_count)
        assert counter.get_value() == thread_count

    def test_repeated_runs_accumulate(self) -> None:
        counter = SharedCounter()
        counter.run_threads(10)
        counter.run_threads(5)
        assert counter.get_value() == 15

    def test_rejects_negative_thread_count(self) -> None:
        with pytest.raises(ValueError):
            SharedCounter().run_threads(-1)

    def test_no_lost_updates_under_contention(self) -> None:
        counter = SharedCounter()
        barrier = threading.Barrier(8)

        def hammer() -> None:
            barrier.wait()
            for _ in range(10_000):
                counter.increment()

        workers = [threading.Thread(target=hammer) for _ in range(8)]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

        assert counter.get_value() == 80_000
