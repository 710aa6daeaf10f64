"""Publishes controller state and alerts to the websocket UI."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from contracts.ui_protocol import EVENT_ALERT, EVENT_TIMER_STATE
from notifier import NotificationDeliveryError
from pomodoro import AlertEvent, Phase, TimerState


class UIServerLike(Protocol):
    @property
    def is_running(self) -> bool:
        ...

    def publish(self, event_type: str, **payload: Any) -> None:
        ...


class RuntimeUIPublisher:
    """State observer and alert notifier backed by the optional UI server."""
    def __init__(self, ui_server: Optional[UIServerLike]):
        self._ui_server = ui_server

    def publish(self, event_type: str, **payload: Any) -> None:
        if self._ui_server:
            self._ui_server.publish(event_type, **payload)

    def publish_timer_state(self, state: TimerState) -> None:
        self.publish(EVENT_TIMER_STATE, **state.to_payload())

    def notify(
        self,
        title: str,
        message: str,
        phase: Phase,
        remaining_seconds: int,
        paused: bool,
    ) -> None:
        if self._ui_server is None or not self._ui_server.is_running:
            raise NotificationDeliveryError("UI server is not running")
        alert = AlertEvent(
            title=title,
            message=message,
            phase=phase,
            remaining_seconds=remaining_seconds,
            paused=paused,
        )
        self.publish(EVENT_ALERT, **alert.to_payload())
