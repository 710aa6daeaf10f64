import unittest

from pomodoro import Phase, TimerState
from pomodoro import transitions


class TransitionRuleTests(unittest.TestCase):
    def test_start_focus_from_break_clears_skip(self) -> None:
        state = TimerState(Phase.BREAK, 12, paused=True, skip_available=True)

        transition = transitions.start_focus(state, 60)

        self.assertEqual(TimerState(Phase.FOCUS, 60, running=True), transition.state)
        self.assertEqual("start", transition.clock)
        self.assertIsNotNone(transition.alert)
        self.assertEqual("Focus started", transition.alert.title)
        self.assertEqual(60, transition.alert.remaining_seconds)
        self.assertFalse(transition.alert.paused)

    def test_start_break_offers_skip(self) -> None:
        transition = transitions.start_break(TimerState.initial(60), 60)

        self.assertEqual(
            TimerState(Phase.BREAK, 60, running=True, skip_available=True),
            transition.state,
        )
        self.assertEqual("Break started", transition.alert.title)
        self.assertEqual("break", transition.alert.cue)

    def test_pause_requires_running(self) -> None:
        rejected = transitions.pause(TimerState.initial(60))
        self.assertFalse(rejected.accepted)
        self.assertEqual("not_running", rejected.reason)
        self.assertEqual("keep", rejected.clock)

        accepted = transitions.pause(TimerState(Phase.FOCUS, 42, running=True))
        self.assertEqual(TimerState(Phase.FOCUS, 42, paused=True), accepted.state)
        self.assertEqual("cancel", accepted.clock)
        self.assertIsNone(accepted.alert)

    def test_resume_requires_paused(self) -> None:
        rejected = transitions.resume(TimerState(Phase.FOCUS, 42, running=True))
        self.assertFalse(rejected.accepted)
        self.assertEqual("not_paused", rejected.reason)

        accepted = transitions.resume(
            TimerState(Phase.BREAK, 17, paused=True, skip_available=True),
        )
        self.assertEqual(
            TimerState(Phase.BREAK, 17, running=True, skip_available=True),
            accepted.state,
        )
        self.assertEqual("start", accepted.clock)
        self.assertIsNone(accepted.alert)

    def test_reset_has_no_alert(self) -> None:
        transition = transitions.reset(
            TimerState(Phase.BREAK, 3, running=True, skip_available=True),
            60,
        )

        self.assertEqual(TimerState.initial(60), transition.state)
        self.assertEqual("cancel", transition.clock)
        self.assertIsNone(transition.alert)

    def test_skip_break_matches_break_expiry(self) -> None:
        state = TimerState(Phase.BREAK, 33, running=True, skip_available=True)

        skipped = transitions.skip_break(state, 60)
        expired = transitions.expire(state, 60)

        self.assertEqual(expired.state, skipped.state)
        self.assertEqual(expired.alert, skipped.alert)
        self.assertEqual("skipped", skipped.reason)

    def test_skip_break_rejected_in_focus(self) -> None:
        state = TimerState(Phase.FOCUS, 33, running=True)

        transition = transitions.skip_break(state, 60)

        self.assertFalse(transition.accepted)
        self.assertIs(state, transition.state)

    def test_tick_ignored_when_not_running(self) -> None:
        self.assertIsNone(transitions.tick(TimerState(Phase.FOCUS, 9, paused=True), 8, 60))
        self.assertEqual(
            8,
            transitions.tick(TimerState(Phase.FOCUS, 9, running=True), 8, 60).state.remaining_seconds,
        )

    def test_tick_never_increases_remaining(self) -> None:
        transition = transitions.tick(TimerState(Phase.FOCUS, 9, running=True), 30, 60)
        self.assertEqual(9, transition.state.remaining_seconds)

    def test_zero_tick_finishes_phase(self) -> None:
        state = TimerState(Phase.FOCUS, 1, running=True)

        transition = transitions.tick(state, 0, 60)

        self.assertEqual(transitions.expire(state, 60), transition)
        self.assertEqual(
            TimerState(Phase.BREAK, 60, running=True, skip_available=True),
            transition.state,
        )
        self.assertEqual("start", transition.clock)
        self.assertEqual("Break started", transition.alert.title)

    def test_expiry_flips_phase(self) -> None:
        focus = transitions.expire(TimerState(Phase.FOCUS, 0, running=True), 60)
        brk = transitions.expire(
            TimerState(Phase.BREAK, 0, running=True, skip_available=True),
            60,
        )

        self.assertEqual(Phase.BREAK, focus.state.phase)
        self.assertEqual(Phase.FOCUS, brk.state.phase)
        self.assertIsNone(transitions.expire(TimerState.initial(60), 60))


class TimerStateTests(unittest.TestCase):
    def test_rejects_running_and_paused(self) -> None:
        with self.assertRaises(ValueError):
            TimerState(Phase.FOCUS, 10, running=True, paused=True)

    def test_rejects_skip_outside_break(self) -> None:
        with self.assertRaises(ValueError):
            TimerState(Phase.FOCUS, 10, skip_available=True)

    def test_status_and_payload(self) -> None:
        state = TimerState(Phase.BREAK, 125, paused=True, skip_available=True)

        self.assertEqual("break_paused", state.status)
        self.assertEqual("02:05", state.remaining_text)
        self.assertEqual(
            {
                "phase": "break",
                "status": "break_paused",
                "remaining_seconds": 125,
                "remaining_text": "02:05",
                "running": False,
                "paused": True,
                "skip_available": True,
            },
            state.to_payload(),
        )


if __name__ == "__main__":
    unittest.main()
