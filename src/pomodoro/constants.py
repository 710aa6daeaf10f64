"""Phase, status, action, and reason constants used by pomodoro runtime logic."""

from __future__ import annotations

DEFAULT_PHASE_SECONDS = 60
DEFAULT_TICK_INTERVAL_SECONDS = 1.0

STATUS_FOCUS_IDLE = "focus_idle"
STATUS_FOCUS_RUNNING = "focus_running"
STATUS_FOCUS_PAUSED = "focus_paused"
STATUS_BREAK_RUNNING = "break_running"
STATUS_BREAK_PAUSED = "break_paused"

ACTION_START = "start"
ACTION_PAUSE = "pause"
ACTION_RESUME = "resume"
ACTION_RESET = "reset"
ACTION_SKIP_BREAK = "skip_break"
ACTION_TOGGLE_PAUSE = "toggle_pause"

COMMAND_ACTIONS: frozenset[str] = frozenset(
    {
        ACTION_START,
        ACTION_PAUSE,
        ACTION_RESUME,
        ACTION_RESET,
        ACTION_SKIP_BREAK,
        ACTION_TOGGLE_PAUSE,
    }
)

# Actions offered by a rendered alert.
ALERT_ACTIONS: tuple[str, ...] = (ACTION_SKIP_BREAK, ACTION_TOGGLE_PAUSE)

REASON_STARTED = "started"
REASON_PAUSED = "paused"
REASON_RESUMED = "resumed"
REASON_RESET = "reset"
REASON_SKIPPED = "skipped"
REASON_NOT_RUNNING = "not_running"
REASON_NOT_PAUSED = "not_paused"
REASON_NOT_BREAK = "not_break"
REASON_UNSUPPORTED_ACTION = "unsupported_action"

FOCUS_ALERT_TITLE = "Focus started"
FOCUS_ALERT_MESSAGE = "The focus session has started."
BREAK_ALERT_TITLE = "Break started"
BREAK_ALERT_MESSAGE = "The break session has started."
