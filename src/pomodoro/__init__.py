from .clock import ManualPhaseClock, PhaseClock, ThreadingPhaseClock
from .constants import DEFAULT_PHASE_SECONDS
from .controller import AlertSink, PomodoroController
from .observable import ObservableValue, TimerStateChannel
from .state import ActionResult, AlertEvent, Phase, TimerState, format_remaining

__all__ = [
    "DEFAULT_PHASE_SECONDS",
    "ActionResult",
    "AlertEvent",
    "AlertSink",
    "ManualPhaseClock",
    "ObservableValue",
    "Phase",
    "PhaseClock",
    "PomodoroController",
    "ThreadingPhaseClock",
    "TimerState",
    "TimerStateChannel",
    "format_remaining",
]
