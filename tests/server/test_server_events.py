import datetime as dt
import json
import unittest

from pomodoro import ActionResult, Phase, TimerState
from server.events import (
    StickyEventStore,
    build_event,
    command_result_event,
    error_event,
    make_event,
)

NOW = dt.datetime(2026, 2, 21, 10, 0, tzinfo=dt.timezone.utc)


def _now() -> dt.datetime:
    return NOW


def _state_event(state: TimerState) -> dict:
    return build_event("timer_state", now_fn=_now, **state.to_payload())


def _alert_event(phase: Phase) -> dict:
    return build_event("alert", now_fn=_now, title="started", phase=phase.value)


class ServerEventsTests(unittest.TestCase):
    def test_make_event_serializes_timestamp_and_payload(self) -> None:
        raw = make_event("timer_state", now_fn=_now, status="focus_idle", remaining_text="01:00")
        payload = json.loads(raw)

        self.assertEqual("timer_state", payload["type"])
        self.assertEqual(NOW.isoformat(), payload["timestamp"])
        self.assertEqual("focus_idle", payload["status"])
        self.assertEqual("01:00", payload["remaining_text"])

    def test_command_result_event_carries_state(self) -> None:
        state = TimerState(Phase.BREAK, 42, paused=True, skip_available=True)
        result = ActionResult(action="pause", accepted=True, reason="paused", state=state)

        payload = json.loads(command_result_event(result, now_fn=_now))

        self.assertEqual("command_result", payload["type"])
        self.assertEqual("paused", payload["reason"])
        self.assertEqual("break_paused", payload["state"]["status"])
        self.assertEqual("00:42", payload["state"]["remaining_text"])

    def test_error_event(self) -> None:
        payload = json.loads(error_event("nope", now_fn=_now))
        self.assertEqual({"type": "error", "timestamp": NOW.isoformat(), "message": "nope"}, payload)

    def test_sticky_store_ignores_non_sticky_events(self) -> None:
        store = StickyEventStore()
        store.remember(build_event("hello", now_fn=_now))
        store.remember(build_event("command_result", now_fn=_now))
        self.assertEqual([], store.snapshot())

    def test_sticky_store_replays_alert_before_state(self) -> None:
        store = StickyEventStore()
        store.remember(_state_event(TimerState(Phase.FOCUS, 60, running=True)))
        store.remember(_alert_event(Phase.FOCUS))

        decoded_types = [json.loads(item)["type"] for item in store.snapshot()]
        self.assertEqual(["alert", "timer_state"], decoded_types)

    def test_sticky_store_keeps_latest_state(self) -> None:
        store = StickyEventStore()
        store.remember(_state_event(TimerState(Phase.FOCUS, 10, running=True)))
        store.remember(_state_event(TimerState(Phase.FOCUS, 9, running=True)))
        snapshot = store.snapshot()

        self.assertEqual(1, len(snapshot))
        self.assertEqual(9, json.loads(snapshot[0])["remaining_seconds"])

    def test_alert_survives_pause_within_its_phase(self) -> None:
        store = StickyEventStore()
        store.remember(_alert_event(Phase.FOCUS))
        store.remember(_state_event(TimerState(Phase.FOCUS, 30, paused=True)))

        self.assertEqual(2, len(store.snapshot()))

    def test_alert_dropped_after_reset_or_phase_change(self) -> None:
        cases = {
            "reset": TimerState.initial(60),
            "phase change": TimerState(Phase.BREAK, 60, running=True, skip_available=True),
        }
        for name, state in cases.items():
            with self.subTest(name):
                store = StickyEventStore()
                store.remember(_alert_event(Phase.FOCUS))
                store.remember(_state_event(state))

                decoded_types = [json.loads(item)["type"] for item in store.snapshot()]
                self.assertEqual(["timer_state"], decoded_types)


if __name__ == "__main__":
    unittest.main()
