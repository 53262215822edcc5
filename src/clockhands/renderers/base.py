from __future__ import annotations

from typing import Generic, TypeVar, final

import pygame
from reactivex import Observable
from reactivex.disposable import Disposable

from clockhands.utilities.logging import get_logger

logger = get_logger(__name__)

StateT = TypeVar("StateT")


class StatefulRenderer(Generic[StateT]):
    """Draw the most recent state snapshot pushed by an observable."""

    def __init__(self) -> None:
        self._state: StateT | None = None
        self._subscription: Disposable | None = None

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def state(self) -> StateT:
        assert self._state is not None
        return self._state

    def has_state(self) -> bool:
        return self._state is not None

    def set_state(self, state: StateT) -> None:
        self._state = state

    def subscribe(self, observable: Observable[StateT]) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
        logger.debug("Subscribing %s to state stream", self.name)
        self._subscription = observable.subscribe(on_next=self.set_state)

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        self._state = None

    @final
    def process(self, window: pygame.Surface) -> None:
        if self._state is None:
            return
        self.real_process(window)

    def real_process(self, window: pygame.Surface) -> None:
        raise NotImplementedError("Please implement")
