"""Notifier implementations that need no platform alert renderer."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from pomodoro import Phase, format_remaining

from .contracts import Notifier
from .errors import NotificationDeliveryError


class LoggingNotifier:
    """Writes alerts to the application log."""
    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("notifier")

    def notify(
        self,
        title: str,
        message: str,
        phase: Phase,
        remaining_seconds: int,
        paused: bool,
    ) -> None:
        self._logger.info(
            "%s: %s (phase=%s remaining=%s paused=%s)",
            title,
            message,
            phase.value,
            format_remaining(remaining_seconds),
            paused,
        )


class CompositeNotifier:
    """Fans an alert out to several notifiers; one failure does not stop the rest."""
    def __init__(self, notifiers: Sequence[Notifier]):
        self._notifiers = tuple(notifiers)

    def __len__(self) -> int:
        return len(self._notifiers)

    def notify(
        self,
        title: str,
        message: str,
        phase: Phase,
        remaining_seconds: int,
        paused: bool,
    ) -> None:
        failures: list[str] = []
        for notifier in self._notifiers:
            try:
                notifier.notify(title, message, phase, remaining_seconds, paused)
            except Exception as error:
                failures.append(f"{type(notifier).__name__}: {error}")
        if failures:
            raise NotificationDeliveryError("; ".join(failures))
