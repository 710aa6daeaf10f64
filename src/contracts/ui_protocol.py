"""Web UI websocket event, message, and field constants."""

from __future__ import annotations

# Server -> client event types
EVENT_HELLO = "hello"
EVENT_TIMER_STATE = "timer_state"
EVENT_ALERT = "alert"
EVENT_COMMAND_RESULT = "command_result"
EVENT_ERROR = "error"

# Client -> server message types
MESSAGE_COMMAND = "command"

STICKY_EVENT_TYPES: frozenset[str] = frozenset(
    {
        EVENT_TIMER_STATE,
        EVENT_ALERT,
    }
)

# Replayed to new clients in this order; the timer state goes last so it wins.
STICKY_EVENT_ORDER: tuple[str, ...] = (
    EVENT_ALERT,
    EVENT_TIMER_STATE,
)
