"""Routes command messages from the web UI into the controller.

This is the only path back into the controller for rendered alerts: the
page's "Skip Break" and "Pause/Resume" buttons post `skip_break` and
`toggle_pause` commands like any other control.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Optional

from contracts.ui_protocol import MESSAGE_COMMAND
from pomodoro import ActionResult
from pomodoro.constants import COMMAND_ACTIONS
from server.events import command_result_event, error_event

# Runs a named controller action, e.g. `PomodoroController.apply`.
CommandSink = Callable[[str], ActionResult]


class CommandRouter:
    """Validates `{"type": "command", "action": ...}` messages and runs them."""
    def __init__(
        self,
        command_sink: CommandSink,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._command_sink = command_sink
        self._logger = logger or logging.getLogger("runtime")

    def handle_message(self, raw: str) -> Optional[str]:
        try:
            message = json.loads(raw)
        except json.JSONDecodeError:
            return self._error("Message is not valid JSON.")

        if not isinstance(message, dict):
            return self._error("Message must be a JSON object.")

        if message.get("type") != MESSAGE_COMMAND:
            self._logger.debug("Ignoring UI message of type %r", message.get("type"))
            return None

        action = message.get("action")
        if not isinstance(action, str) or action not in COMMAND_ACTIONS:
            return self._error(f"Unsupported command action: {action!r}")

        result = self._command_sink(action)
        self._logger.debug(
            "UI command %s: accepted=%s reason=%s",
            action,
            result.accepted,
            result.reason,
        )
        return command_result_event(result)

    def _error(self, text: str) -> str:
        self._logger.warning("Rejected UI message: %s", text)
        return error_event(text)
