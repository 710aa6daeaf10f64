"""Thread-safe focus/break state machine driving a phase clock."""

from __future__ import annotations

import logging
import threading
from functools import partial
from typing import Callable, Optional, Protocol

from . import transitions
from .clock import PhaseClock, ThreadingPhaseClock
from .constants import (
    ACTION_PAUSE,
    ACTION_RESET,
    ACTION_RESUME,
    ACTION_SKIP_BREAK,
    ACTION_START,
    ACTION_TOGGLE_PAUSE,
    DEFAULT_PHASE_SECONDS,
    REASON_UNSUPPORTED_ACTION,
)
from .observable import TimerStateChannel, Unsubscribe
from .state import ActionResult, AlertEvent, TimerState
from .transitions import CLOCK_CANCEL, CLOCK_KEEP, CLOCK_START, Transition


class AlertSink(Protocol):
    def dispatch(self, alert: AlertEvent) -> None: ...


class PomodoroController:
    """Owns the single `TimerState` and serializes commands against clock events.

    Every mutation happens under one re-entrant lock. Each countdown is tagged
    with an epoch; ticks or expiries carrying an older epoch are discarded, so
    a callback racing with `cancel()` cannot touch the new phase. The zero
    tick starts the next phase under the same lock, so no observer or command
    ever sees a committed state with zero time left.
    """

    def __init__(
        self,
        *,
        clock: Optional[PhaseClock] = None,
        alerts: Optional[AlertSink] = None,
        duration_seconds: int = DEFAULT_PHASE_SECONDS,
        logger: Optional[logging.Logger] = None,
    ):
        if duration_seconds <= 0:
            raise ValueError("duration_seconds must be greater than zero")

        self._duration_seconds = int(duration_seconds)
        self._clock: PhaseClock = clock or ThreadingPhaseClock()
        self._alerts = alerts
        self._logger = logger or logging.getLogger("pomodoro")
        self._lock = threading.RLock()
        self._epoch = 0

        self._state = TimerState.initial(self._duration_seconds)
        self._channel = TimerStateChannel(self._state, logger=self._logger)

        self._commands: dict[str, Callable[[], ActionResult]] = {
            ACTION_START: self.start_focus_session,
            ACTION_PAUSE: self.pause_timer,
            ACTION_RESUME: self.resume_timer,
            ACTION_RESET: self.reset_timer,
            ACTION_SKIP_BREAK: self.skip_break,
            ACTION_TOGGLE_PAUSE: self.toggle_pause,
        }

    @property
    def duration_seconds(self) -> int:
        return self._duration_seconds

    @property
    def channel(self) -> TimerStateChannel:
        return self._channel

    def snapshot(self) -> TimerState:
        with self._lock:
            return self._state

    def subscribe(self, callback: Callable[[TimerState], None]) -> Unsubscribe:
        """Register a whole-state observer; it receives the current state first."""
        return self._channel.state.subscribe(callback)

    def start_focus_session(self) -> ActionResult:
        with self._lock:
            return self._apply_locked(
                ACTION_START,
                transitions.start_focus(self._state, self._duration_seconds),
            )

    def pause_timer(self) -> ActionResult:
        with self._lock:
            return self._apply_locked(ACTION_PAUSE, transitions.pause(self._state))

    def resume_timer(self) -> ActionResult:
        with self._lock:
            return self._apply_locked(ACTION_RESUME, transitions.resume(self._state))

    def reset_timer(self) -> ActionResult:
        with self._lock:
            return self._apply_locked(
                ACTION_RESET,
                transitions.reset(self._state, self._duration_seconds),
            )

    def skip_break(self) -> ActionResult:
        with self._lock:
            return self._apply_locked(
                ACTION_SKIP_BREAK,
                transitions.skip_break(self._state, self._duration_seconds),
            )

    def toggle_pause(self) -> ActionResult:
        with self._lock:
            if self._state.running:
                return self.pause_timer()
            return self.resume_timer()

    def apply(self, action: str) -> ActionResult:
        """Run a command by name; unknown names are rejected, never raised."""
        command = self._commands.get(action)
        if command is None:
            with self._lock:
                return ActionResult(
                    action=action,
                    accepted=False,
                    reason=REASON_UNSUPPORTED_ACTION,
                    state=self._state,
                )
        return command()

    def close(self) -> None:
        with self._lock:
            self._epoch += 1
            self._clock.cancel()

    def _apply_locked(self, action: str, transition: Transition) -> ActionResult:
        if not transition.accepted:
            self._logger.debug(
                "Command ignored: action=%s reason=%s status=%s",
                action,
                transition.reason,
                self._state.status,
            )
            return ActionResult(
                action=action,
                accepted=False,
                reason=transition.reason,
                state=self._state,
            )

        self._commit_locked(transition)
        self._logger.info(
            "Pomodoro %s: phase=%s remaining=%ss",
            transition.reason,
            self._state.phase.value,
            self._state.remaining_seconds,
        )
        return ActionResult(
            action=action,
            accepted=True,
            reason=transition.reason,
            state=self._state,
        )

    def _commit_locked(self, transition: Transition) -> None:
        if transition.clock in (CLOCK_START, CLOCK_CANCEL):
            self._epoch += 1
            self._clock.cancel()

        self._state = transition.state

        if transition.clock == CLOCK_START:
            epoch = self._epoch
            self._clock.start(
                self._state.remaining_seconds,
                on_tick=partial(self._on_clock_tick, epoch),
                on_expiry=partial(self._on_clock_expiry, epoch),
            )

        self._channel.publish(self._state)

        if transition.alert is not None:
            self._dispatch_alert(transition.alert)

    def _dispatch_alert(self, alert: AlertEvent) -> None:
        if self._alerts is None:
            return
        try:
            self._alerts.dispatch(alert)
        except Exception as error:
            self._logger.warning("Alert dispatch failed: %s", error)

    def _on_clock_tick(self, epoch: int, remaining_seconds: int) -> None:
        with self._lock:
            if epoch != self._epoch:
                self._logger.debug("Discarding stale tick: epoch=%s", epoch)
                return
            transition = transitions.tick(
                self._state,
                remaining_seconds,
                self._duration_seconds,
            )
            if transition is None:
                self._logger.debug("Discarding tick while stopped")
                return
            if transition.clock == CLOCK_KEEP:
                self._state = transition.state
                self._channel.publish(self._state)
                return
            self._finish_phase_locked(transition)

    def _on_clock_expiry(self, epoch: int) -> None:
        with self._lock:
            if epoch != self._epoch:
                self._logger.debug("Discarding stale expiry: epoch=%s", epoch)
                return
            transition = transitions.expire(self._state, self._duration_seconds)
            if transition is None:
                self._logger.debug("Discarding expiry while stopped")
                return
            self._finish_phase_locked(transition)

    def _finish_phase_locked(self, transition: Transition) -> None:
        finished_phase = self._state.phase
        self._commit_locked(transition)
        self._logger.info(
            "Pomodoro %s phase completed, %s phase started",
            finished_phase.value,
            self._state.phase.value,
        )
