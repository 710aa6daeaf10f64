"""Immutable timer state, alert payload, and command result types."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from .constants import (
    ALERT_ACTIONS,
    DEFAULT_PHASE_SECONDS,
    STATUS_BREAK_PAUSED,
    STATUS_BREAK_RUNNING,
    STATUS_FOCUS_IDLE,
    STATUS_FOCUS_PAUSED,
    STATUS_FOCUS_RUNNING,
)


class Phase(str, Enum):
    FOCUS = "focus"
    BREAK = "break"


def format_remaining(seconds: int) -> str:
    """Format a duration in seconds as `MM:SS`."""
    minutes, remainder = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{remainder:02d}"


@dataclass(frozen=True)
class TimerState:
    """Single source of truth for the focus/break cycle."""
    phase: Phase
    remaining_seconds: int
    running: bool = False
    paused: bool = False
    skip_available: bool = False

    def __post_init__(self) -> None:
        if self.remaining_seconds < 0:
            raise ValueError("remaining_seconds must not be negative")
        if self.running and self.paused:
            raise ValueError("timer cannot be running and paused at the same time")
        if self.skip_available and self.phase != Phase.BREAK:
            raise ValueError("skip is only available during a break")

    @classmethod
    def initial(cls, duration_seconds: int = DEFAULT_PHASE_SECONDS) -> "TimerState":
        return cls(phase=Phase.FOCUS, remaining_seconds=int(duration_seconds))

    @property
    def status(self) -> str:
        if self.phase == Phase.BREAK:
            return STATUS_BREAK_PAUSED if self.paused else STATUS_BREAK_RUNNING
        if self.running:
            return STATUS_FOCUS_RUNNING
        if self.paused:
            return STATUS_FOCUS_PAUSED
        return STATUS_FOCUS_IDLE

    @property
    def remaining_text(self) -> str:
        return format_remaining(self.remaining_seconds)

    def evolve(self, **changes) -> "TimerState":
        return replace(self, **changes)

    def to_payload(self) -> dict[str, object]:
        return {
            "phase": self.phase.value,
            "status": self.status,
            "remaining_seconds": self.remaining_seconds,
            "remaining_text": self.remaining_text,
            "running": self.running,
            "paused": self.paused,
            "skip_available": self.skip_available,
        }


@dataclass(frozen=True)
class AlertEvent:
    """Discrete notify event emitted when a focus or break session starts."""
    title: str
    message: str
    phase: Phase
    remaining_seconds: int
    paused: bool
    actions: tuple[str, ...] = field(default=ALERT_ACTIONS)

    @property
    def cue(self) -> str:
        """Renderer hint for phase-specific sound, vibration, and colour."""
        return self.phase.value

    def to_payload(self) -> dict[str, object]:
        return {
            "title": self.title,
            "message": self.message,
            "phase": self.phase.value,
            "remaining_seconds": self.remaining_seconds,
            "remaining_text": format_remaining(self.remaining_seconds),
            "paused": self.paused,
            "cue": self.cue,
            "actions": list(self.actions),
        }


@dataclass(frozen=True)
class ActionResult:
    """Result envelope returned after applying a controller command."""
    action: str
    accepted: bool
    reason: str
    state: TimerState
