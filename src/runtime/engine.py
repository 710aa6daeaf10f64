"""Runtime engine wiring the controller to clocks, notifiers, and the UI server."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from app_config import AppConfig
from notifier import AlertDispatcher, CompositeNotifier, LoggingNotifier, Notifier
from pomodoro import PhaseClock, PomodoroController, ThreadingPhaseClock
from server import UIServer

from .commands import CommandRouter
from .ui import RuntimeUIPublisher


@dataclass(frozen=True)
class RuntimeBootstrap:
    """Dependency bundle required to construct the runtime engine."""
    logger: logging.Logger
    app_config: AppConfig
    ui_server: Optional[UIServer] = None
    clock: Optional[PhaseClock] = None


class RuntimeEngine:
    """Composition root owning the single controller for the process lifetime."""
    def __init__(self, bootstrap: RuntimeBootstrap):
        self._bootstrap = bootstrap
        self._logger = bootstrap.logger
        settings = bootstrap.app_config

        self._ui = RuntimeUIPublisher(bootstrap.ui_server)

        notifiers: list[Notifier] = []
        if settings.notifier.log_alerts:
            notifiers.append(LoggingNotifier(logging.getLogger("notifier")))
        if settings.notifier.ui_alerts and bootstrap.ui_server is not None:
            notifiers.append(self._ui)
        self._alerts: Optional[AlertDispatcher] = None
        if notifiers:
            self._alerts = AlertDispatcher(
                CompositeNotifier(notifiers),
                logger=logging.getLogger("notifier"),
            )

        clock = bootstrap.clock or ThreadingPhaseClock(
            logger=logging.getLogger("pomodoro.clock"),
        )
        self._clock = clock
        self._controller = PomodoroController(
            clock=clock,
            alerts=self._alerts,
            logger=logging.getLogger("pomodoro"),
        )
        self._commands = CommandRouter(
            self._controller.apply,
            logger=logging.getLogger("runtime"),
        )
        if bootstrap.ui_server is not None:
            bootstrap.ui_server.set_message_handler(self._commands.handle_message)

        self._unsubscribe = self._controller.subscribe(self._ui.publish_timer_state)
        self._stop_requested = threading.Event()

    @property
    def controller(self) -> PomodoroController:
        return self._controller

    @property
    def clock(self) -> PhaseClock:
        return self._clock

    @property
    def commands(self) -> CommandRouter:
        return self._commands

    def stop(self) -> None:
        self._stop_requested.set()

    def run(self, poll_interval_seconds: float = 0.5) -> int:
        try:
            if self._bootstrap.app_config.pomodoro.auto_start:
                self._controller.start_focus_session()

            self._logger.info(
                "Ready! Timer state: %s",
                self._controller.snapshot().status,
            )
            while not self._stop_requested.wait(poll_interval_seconds):
                pass
            return 0
        except KeyboardInterrupt:
            self._logger.info("Shutdown requested by keyboard interrupt.")
            return 0
        except Exception as error:
            self._logger.error("Unexpected error: %s", error, exc_info=True)
            return 1
        finally:
            self._shutdown()

    def _shutdown(self) -> None:
        self._unsubscribe()
        self._controller.close()

        if self._alerts is not None:
            self._logger.info("Stopping alert dispatcher...")
            self._alerts.close(wait=False)

        ui_server = self._bootstrap.ui_server
        if ui_server is not None:
            self._logger.info("Stopping UI server...")
            try:
                ui_server.stop(timeout_seconds=5.0)
            except Exception as error:
                self._logger.error("Error stopping UI server: %s", error, exc_info=True)
