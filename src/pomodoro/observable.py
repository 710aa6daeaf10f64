"""Observable values exposing timer state fields to UI subscribers."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, Optional, TypeVar

from .state import Phase, TimerState

T = TypeVar("T")
Unsubscribe = Callable[[], None]


class ObservableValue(Generic[T]):
    """Holds a value and notifies subscribers on every publish.

    Values are re-published even when unchanged so that subscribers see one
    update per tick.
    """

    def __init__(
        self,
        name: str,
        initial: T,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._name = name
        self._value = initial
        self._logger = logger or logging.getLogger("pomodoro.observable")
        self._lock = threading.Lock()
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, callback: Callable[[T], None], *, replay: bool = True) -> Unsubscribe:
        with self._lock:
            self._subscribers.append(callback)
        if replay:
            self._deliver(callback, self._value)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, value: T) -> None:
        self._value = value
        with self._lock:
            subscribers = tuple(self._subscribers)
        for callback in subscribers:
            self._deliver(callback, value)

    def _deliver(self, callback: Callable[[T], None], value: T) -> None:
        try:
            callback(value)
        except Exception as error:
            self._logger.error(
                "Subscriber of %s failed: %s",
                self._name,
                error,
                exc_info=True,
            )


class TimerStateChannel:
    """Per-field observables mirroring the controller's `TimerState`."""

    def __init__(
        self,
        initial: TimerState,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self.state: ObservableValue[TimerState] = ObservableValue(
            "state", initial, logger=logger
        )
        self.phase: ObservableValue[Phase] = ObservableValue(
            "phase", initial.phase, logger=logger
        )
        self.remaining: ObservableValue[str] = ObservableValue(
            "remaining", initial.remaining_text, logger=logger
        )
        self.running: ObservableValue[bool] = ObservableValue(
            "running", initial.running, logger=logger
        )
        self.paused: ObservableValue[bool] = ObservableValue(
            "paused", initial.paused, logger=logger
        )
        self.skip_available: ObservableValue[bool] = ObservableValue(
            "skip_available", initial.skip_available, logger=logger
        )

    def publish(self, state: TimerState) -> None:
        self.phase.publish(state.phase)
        self.remaining.publish(state.remaining_text)
        self.running.publish(state.running)
        self.paused.publish(state.paused)
        self.skip_available.publish(state.skip_available)
        self.state.publish(state)
