"""Fire-and-forget alert delivery that shields the controller from notifier failures."""

from __future__ import annotations

import concurrent.futures
import logging
from typing import Optional

from pomodoro import AlertEvent

from .contracts import Notifier
from .errors import NotifierError


class AlertDispatcher:
    """Delivers alerts on a single worker thread and swallows delivery failures."""
    def __init__(
        self,
        notifier: Notifier,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._notifier = notifier
        self._logger = logger or logging.getLogger("notifier")
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="alert",
        )

    def dispatch(self, alert: AlertEvent) -> None:
        try:
            self._executor.submit(self._deliver, alert)
        except RuntimeError:
            # Executor is shutting down.
            self._logger.debug("Dropping alert after shutdown: %s", alert.title)

    def close(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _deliver(self, alert: AlertEvent) -> None:
        try:
            self._notifier.notify(
                alert.title,
                alert.message,
                alert.phase,
                alert.remaining_seconds,
                alert.paused,
            )
        except NotifierError as error:
            self._logger.warning("Alert not delivered (%s): %s", alert.title, error)
        except Exception as error:
            self._logger.error(
                "Notifier failed for alert %s: %s",
                alert.title,
                error,
                exc_info=True,
            )
