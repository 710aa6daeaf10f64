class NotifierError(Exception):
    """Base exception for alert delivery failures."""


class NotificationPermissionError(NotifierError):
    """Raised when the platform refuses to display alerts."""


class NotificationDeliveryError(NotifierError):
    """Raised when an alert could not be delivered to its renderer."""
