import json
import logging
import threading
import unittest

from app_config_schema import AppConfig, NotifierSettings, PomodoroSettings
from pomodoro import ManualPhaseClock, Phase, ThreadingPhaseClock
from runtime import RuntimeBootstrap, RuntimeEngine


class _UIServerStub:
    def __init__(self, running: bool = True):
        self.running = running
        self.events: list[tuple[str, dict[str, object]]] = []
        self.handler = None
        self.stopped = False
        self.alert_received = threading.Event()

    @property
    def is_running(self) -> bool:
        return self.running

    def publish(self, event_type: str, **payload) -> None:
        self.events.append((event_type, payload))
        if event_type == "alert":
            self.alert_received.set()

    def set_message_handler(self, handler) -> None:
        self.handler = handler

    def stop(self, timeout_seconds: float = 5.0) -> None:
        self.stopped = True

    def states(self) -> list[dict[str, object]]:
        return [payload for kind, payload in self.events if kind == "timer_state"]


def _engine(ui: _UIServerStub, clock: ManualPhaseClock, **settings) -> RuntimeEngine:
    return RuntimeEngine(
        RuntimeBootstrap(
            logger=logging.getLogger("test"),
            app_config=AppConfig(**settings),
            ui_server=ui,
            clock=clock,
        )
    )


class RuntimeEngineTests(unittest.TestCase):
    def test_publishes_initial_state_and_wires_commands(self) -> None:
        ui = _UIServerStub()
        clock = ManualPhaseClock()
        engine = _engine(ui, clock, notifier=NotifierSettings(log_alerts=False))

        self.assertEqual("focus_idle", ui.states()[0]["status"])
        self.assertIsNotNone(ui.handler)

        reply = ui.handler('{"type": "command", "action": "start"}')
        self.assertTrue(json.loads(reply)["accepted"])
        self.assertTrue(ui.alert_received.wait(1.0))

        clock.advance(60)
        self.assertEqual("break_running", ui.states()[-1]["status"])
        self.assertTrue(ui.states()[-1]["skip_available"])

        # The alert's "Skip Break" button posts a regular command.
        reply = ui.handler('{"type": "command", "action": "skip_break"}')
        self.assertEqual("skipped", json.loads(reply)["reason"])
        self.assertEqual(Phase.FOCUS, engine.controller.snapshot().phase)

        engine.stop()
        self.assertEqual(0, engine.run())
        self.assertTrue(ui.stopped)
        self.assertFalse(clock.is_active)

    def test_alert_reaches_ui_with_actions(self) -> None:
        ui = _UIServerStub()
        engine = _engine(ui, ManualPhaseClock(), notifier=NotifierSettings(log_alerts=False))

        engine.controller.start_focus_session()

        self.assertTrue(ui.alert_received.wait(1.0))
        alert = next(payload for kind, payload in ui.events if kind == "alert")
        self.assertEqual("Focus started", alert["title"])
        self.assertEqual(["skip_break", "toggle_pause"], alert["actions"])
        self.assertEqual("focus", alert["cue"])

        engine.stop()
        engine.run()

    def test_auto_start_begins_focus_session(self) -> None:
        ui = _UIServerStub()
        clock = ManualPhaseClock()
        engine = _engine(
            ui,
            clock,
            pomodoro=PomodoroSettings(auto_start=True),
            notifier=NotifierSettings(log_alerts=False, ui_alerts=False),
        )

        engine.stop()
        self.assertEqual(0, engine.run())

        statuses = [state["status"] for state in ui.states()]
        self.assertIn("focus_running", statuses)
        self.assertEqual([60], clock.started_durations)

    def test_default_clock_ticks_once_per_second(self) -> None:
        engine = RuntimeEngine(
            RuntimeBootstrap(
                logger=logging.getLogger("test"),
                app_config=AppConfig(notifier=NotifierSettings(log_alerts=False, ui_alerts=False)),
            )
        )

        self.assertIsInstance(engine.clock, ThreadingPhaseClock)
        self.assertEqual(1.0, engine.clock.interval_seconds)
        self.assertEqual(60, engine.controller.duration_seconds)
        engine.stop()
        engine.run()

    def test_ui_notifier_failure_keeps_controller_running(self) -> None:
        ui = _UIServerStub(running=False)
        clock = ManualPhaseClock()
        engine = _engine(ui, clock, notifier=NotifierSettings(log_alerts=False))

        result = engine.controller.start_focus_session()

        self.assertTrue(result.accepted)
        self.assertTrue(clock.is_active)
        engine.stop()
        engine.run()


if __name__ == "__main__":
    unittest.main()
