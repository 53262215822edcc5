from __future__ import annotations

from datetime import datetime
from typing import Any, Callable

import reactivex
from reactivex import operators as ops

from clockhands.clock.engine import ClockEngine, ClockFrame

EngineOp = Callable[[ClockEngine], ClockFrame | None]


class ClockStateProvider:
    """Fold frame ticks and reset requests into a stream of clock frames."""

    def __init__(self, engine: ClockEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> ClockEngine:
        return self._engine

    def observable(
        self,
        frame_ticks: reactivex.Observable[datetime],
        resets: reactivex.Observable[Any],
    ) -> reactivex.Observable[ClockFrame]:
        def op_from_tick(now: datetime) -> EngineOp:
            return lambda engine: engine.advance(now)

        def op_from_reset(_: object) -> EngineOp:
            def request(engine: ClockEngine) -> None:
                engine.request_reset()
                return None

            return request

        operations: reactivex.Observable[EngineOp] = reactivex.merge(
            resets.pipe(ops.map(op_from_reset)),
            frame_ticks.pipe(ops.map(op_from_tick)),
        )

        return operations.pipe(
            ops.map(lambda op: op(self._engine)),
            ops.filter(lambda frame: frame is not None),
            ops.share(),
        )
