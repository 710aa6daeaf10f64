"""Websocket event envelopes and the replay cache for late-joining clients."""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from contracts.ui_protocol import (
    EVENT_ALERT,
    EVENT_COMMAND_RESULT,
    EVENT_ERROR,
    EVENT_TIMER_STATE,
    STICKY_EVENT_ORDER,
    STICKY_EVENT_TYPES,
)
from pomodoro import ActionResult

Event = dict[str, Any]
Clock = Callable[[], datetime]


def build_event(
    event_type: str,
    *,
    now_fn: Optional[Clock] = None,
    **payload: Any,
) -> Event:
    now = now_fn() if now_fn is not None else datetime.now(timezone.utc)
    return {"type": event_type, "timestamp": now.isoformat(), **payload}


def encode_event(event: Event) -> str:
    return json.dumps(event)


def make_event(
    event_type: str,
    *,
    now_fn: Optional[Clock] = None,
    **payload: Any,
) -> str:
    """Serialize a typed, timestamped event for websocket delivery."""
    return encode_event(build_event(event_type, now_fn=now_fn, **payload))


def command_result_event(result: ActionResult, *, now_fn: Optional[Clock] = None) -> str:
    return make_event(
        EVENT_COMMAND_RESULT,
        now_fn=now_fn,
        action=result.action,
        accepted=result.accepted,
        reason=result.reason,
        state=result.state.to_payload(),
    )


def error_event(message: str, *, now_fn: Optional[Clock] = None) -> str:
    return make_event(EVENT_ERROR, now_fn=now_fn, message=message)


def _alert_outlived(alert: Event, state: Event) -> bool:
    # An alert announces a session start; it is stale once that session ends.
    if not state.get("running") and not state.get("paused"):
        return True
    return alert.get("phase") != state.get("phase")


class StickyEventStore:
    """Latest timer state and alert, replayed to websocket clients on connect.

    The alert is only kept while the session it announced is still current,
    so a client joining after a reset or a phase change sees no stale buttons.
    """

    def __init__(self):
        self._events: dict[str, Event] = {}
        self._lock = threading.Lock()

    def remember(self, event: Event) -> None:
        event_type = event.get("type")
        if event_type not in STICKY_EVENT_TYPES:
            return
        with self._lock:
            self._events[event_type] = event
            alert = self._events.get(EVENT_ALERT)
            if (
                event_type == EVENT_TIMER_STATE
                and alert is not None
                and _alert_outlived(alert, event)
            ):
                del self._events[EVENT_ALERT]

    def snapshot(self) -> list[str]:
        with self._lock:
            return [
                encode_event(self._events[key])
                for key in STICKY_EVENT_ORDER
                if key in self._events
            ]
