"""Restartable countdown clocks that drive the pomodoro controller."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional, Protocol

from .constants import DEFAULT_TICK_INTERVAL_SECONDS

TickCallback = Callable[[int], None]
ExpiryCallback = Callable[[], None]


class PhaseClock(Protocol):
    """Countdown emitting one tick per interval and a single expiry at zero."""

    @property
    def is_active(self) -> bool: ...

    def start(
        self,
        duration_seconds: int,
        *,
        on_tick: TickCallback,
        on_expiry: ExpiryCallback,
    ) -> None: ...

    def cancel(self) -> None: ...


def _validate_duration(duration_seconds: int) -> int:
    duration = int(duration_seconds)
    if duration <= 0:
        raise ValueError("duration_seconds must be greater than zero")
    return duration


class ThreadingPhaseClock:
    """Wall-clock countdown running on a daemon thread with monotonic deadlines.

    Each `start()` spawns a fresh worker with its own stop event, so a
    cancelled worker can never tick on behalf of its successor. `cancel()`
    only signals the worker and does not join it: it is routinely called
    from inside the worker's own expiry callback.
    """

    def __init__(
        self,
        *,
        interval_seconds: float = DEFAULT_TICK_INTERVAL_SECONDS,
        logger: Optional[logging.Logger] = None,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero")
        self._interval_seconds = float(interval_seconds)
        self._logger = logger or logging.getLogger("pomodoro.clock")
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None

    @property
    def interval_seconds(self) -> float:
        return self._interval_seconds

    @property
    def is_active(self) -> bool:
        with self._lock:
            return (
                self._thread is not None
                and self._thread.is_alive()
                and self._stop_event is not None
                and not self._stop_event.is_set()
            )

    def start(
        self,
        duration_seconds: int,
        *,
        on_tick: TickCallback,
        on_expiry: ExpiryCallback,
    ) -> None:
        duration = _validate_duration(duration_seconds)
        with self._lock:
            self._cancel_locked()
            stop_event = threading.Event()
            thread = threading.Thread(
                target=self._run,
                args=(duration, on_tick, on_expiry, stop_event),
                daemon=True,
                name="phase-clock",
            )
            self._stop_event = stop_event
            self._thread = thread
            thread.start()
        self._logger.debug("Clock started: duration=%ss", duration)

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        if self._stop_event is not None:
            self._stop_event.set()
        self._stop_event = None
        self._thread = None

    def _run(
        self,
        duration: int,
        on_tick: TickCallback,
        on_expiry: ExpiryCallback,
        stop_event: threading.Event,
    ) -> None:
        started_at = time.monotonic()
        try:
            for step in range(1, duration + 1):
                deadline = started_at + step * self._interval_seconds
                if stop_event.wait(max(0.0, deadline - time.monotonic())):
                    return
                on_tick(duration - step)

            if stop_event.is_set():
                return
            with self._lock:
                if self._stop_event is stop_event:
                    self._stop_event = None
                    self._thread = None
            on_expiry()
        except Exception as error:
            self._logger.error("Clock callback failed: %s", error, exc_info=True)
            stop_event.set()


class ManualPhaseClock:
    """Deterministic clock advanced explicitly by the caller.

    `advance(steps)` lets `steps` intervals elapse: each emits the next tick,
    and the zero tick is followed by the expiry. Countdowns started from
    inside a callback keep consuming the remaining steps.
    """

    def __init__(self) -> None:
        self._remaining: Optional[int] = None
        self._on_tick: Optional[TickCallback] = None
        self._on_expiry: Optional[ExpiryCallback] = None
        self._generation = 0
        self.started_durations: list[int] = []
        self.cancel_count = 0

    @property
    def is_active(self) -> bool:
        return self._remaining is not None

    @property
    def remaining_seconds(self) -> Optional[int]:
        return self._remaining

    def start(
        self,
        duration_seconds: int,
        *,
        on_tick: TickCallback,
        on_expiry: ExpiryCallback,
    ) -> None:
        duration = _validate_duration(duration_seconds)
        self.cancel()
        self._generation += 1
        self._remaining = duration
        self._on_tick = on_tick
        self._on_expiry = on_expiry
        self.started_durations.append(duration)

    def cancel(self) -> None:
        if self._remaining is None:
            return
        self.cancel_count += 1
        self._remaining = None
        self._on_tick = None
        self._on_expiry = None

    def advance(self, steps: int = 1) -> int:
        """Let `steps` intervals elapse; returns the number of events emitted."""
        emitted = 0
        for _ in range(max(0, int(steps))):
            if self._remaining is None or self._on_tick is None:
                break

            generation = self._generation
            self._remaining -= 1
            remaining = self._remaining
            on_expiry = self._on_expiry
            self._on_tick(remaining)
            emitted += 1

            if remaining > 0 or generation != self._generation or self._remaining is None:
                continue

            self._remaining = None
            self._on_tick = None
            self._on_expiry = None
            if on_expiry is not None:
                on_expiry()
                emitted += 1
        return emitted
