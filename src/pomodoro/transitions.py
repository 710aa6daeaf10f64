"""Pure transition rules for the focus/break state machine.

Every function takes the current `TimerState` and returns a `Transition`
describing the next state, the alert to emit (if any), and what the
controller must do with its clock. Nothing here touches clocks, locks,
observers, or notifiers, so the rules can be tested in isolation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .constants import (
    BREAK_ALERT_MESSAGE,
    BREAK_ALERT_TITLE,
    FOCUS_ALERT_MESSAGE,
    FOCUS_ALERT_TITLE,
    REASON_NOT_BREAK,
    REASON_NOT_PAUSED,
    REASON_NOT_RUNNING,
    REASON_PAUSED,
    REASON_RESET,
    REASON_RESUMED,
    REASON_SKIPPED,
    REASON_STARTED,
)
from .state import AlertEvent, Phase, TimerState

ClockCommand = Literal["start", "cancel", "keep"]

CLOCK_START: ClockCommand = "start"
CLOCK_CANCEL: ClockCommand = "cancel"
CLOCK_KEEP: ClockCommand = "keep"


@dataclass(frozen=True)
class Transition:
    state: TimerState
    clock: ClockCommand = CLOCK_KEEP
    alert: Optional[AlertEvent] = None
    accepted: bool = True
    reason: str = ""


def _rejected(state: TimerState, reason: str) -> Transition:
    return Transition(state=state, clock=CLOCK_KEEP, accepted=False, reason=reason)


def start_focus(state: TimerState, duration_seconds: int) -> Transition:
    del state  # A focus session starts from any state.
    next_state = TimerState(
        phase=Phase.FOCUS,
        remaining_seconds=duration_seconds,
        running=True,
        paused=False,
        skip_available=False,
    )
    return Transition(
        state=next_state,
        clock=CLOCK_START,
        alert=AlertEvent(
            title=FOCUS_ALERT_TITLE,
            message=FOCUS_ALERT_MESSAGE,
            phase=Phase.FOCUS,
            remaining_seconds=duration_seconds,
            paused=False,
        ),
        reason=REASON_STARTED,
    )


def start_break(state: TimerState, duration_seconds: int) -> Transition:
    del state
    next_state = TimerState(
        phase=Phase.BREAK,
        remaining_seconds=duration_seconds,
        running=True,
        paused=False,
        skip_available=True,
    )
    return Transition(
        state=next_state,
        clock=CLOCK_START,
        alert=AlertEvent(
            title=BREAK_ALERT_TITLE,
            message=BREAK_ALERT_MESSAGE,
            phase=Phase.BREAK,
            remaining_seconds=duration_seconds,
            paused=False,
        ),
        reason=REASON_STARTED,
    )


def pause(state: TimerState) -> Transition:
    if not state.running:
        return _rejected(state, REASON_NOT_RUNNING)
    return Transition(
        state=state.evolve(running=False, paused=True),
        clock=CLOCK_CANCEL,
        reason=REASON_PAUSED,
    )


def resume(state: TimerState) -> Transition:
    if not state.paused:
        return _rejected(state, REASON_NOT_PAUSED)
    return Transition(
        state=state.evolve(running=True, paused=False),
        clock=CLOCK_START,
        reason=REASON_RESUMED,
    )


def reset(state: TimerState, duration_seconds: int) -> Transition:
    del state
    return Transition(
        state=TimerState.initial(duration_seconds),
        clock=CLOCK_CANCEL,
        reason=REASON_RESET,
    )


def skip_break(state: TimerState, duration_seconds: int) -> Transition:
    if state.phase != Phase.BREAK:
        return _rejected(state, REASON_NOT_BREAK)
    transition = start_focus(state, duration_seconds)
    return Transition(
        state=transition.state,
        clock=transition.clock,
        alert=transition.alert,
        reason=REASON_SKIPPED,
    )


def tick(
    state: TimerState,
    remaining_seconds: int,
    duration_seconds: int,
) -> Optional[Transition]:
    """Apply a clock tick; returns None when the tick must be discarded.

    The zero tick finishes the phase on the spot, so a zero remaining time is
    never committed and the clock's own expiry for that countdown goes stale.
    """
    if not state.running:
        return None
    remaining = max(0, min(state.remaining_seconds, int(remaining_seconds)))
    if remaining == 0:
        return expire(state, duration_seconds)
    return Transition(state=state.evolve(remaining_seconds=remaining))


def expire(state: TimerState, duration_seconds: int) -> Optional[Transition]:
    """Apply a clock expiry; returns None when the expiry must be discarded."""
    if not state.running:
        return None
    stopped = state.evolve(running=False, remaining_seconds=0)
    if state.phase == Phase.FOCUS:
        return start_break(stopped, duration_seconds)
    return start_focus(stopped, duration_seconds)
