"""Notifier protocol implemented by alert renderers."""

from __future__ import annotations

from typing import Protocol

from pomodoro import Phase


class Notifier(Protocol):
    """Protocol for renderers that present session-start alerts.

    A renderer offering "Skip Break" or "Pause/Resume" buttons posts them back
    as command messages (see `runtime.commands.CommandRouter`); it never holds
    a handle on the controller.
    """
    def notify(
        self,
        title: str,
        message: str,
        phase: Phase,
        remaining_seconds: int,
        paused: bool,
    ) -> None:
        ...
