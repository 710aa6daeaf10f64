"""Alert delivery boundary between the pomodoro controller and renderers."""

from .contracts import Notifier
from .dispatch import AlertDispatcher
from .errors import NotificationDeliveryError, NotificationPermissionError, NotifierError
from .log_notifier import CompositeNotifier, LoggingNotifier

__all__ = [
    "AlertDispatcher",
    "CompositeNotifier",
    "LoggingNotifier",
    "NotificationDeliveryError",
    "NotificationPermissionError",
    "Notifier",
    "NotifierError",
]
