"""Websocket UI server streaming timer state and accepting UI commands."""

from .config import ServerConfigurationError, UIServerConfig
from .events import StickyEventStore, make_event
from .service import UIServer

__all__ = [
    "ServerConfigurationError",
    "StickyEventStore",
    "UIServer",
    "UIServerConfig",
    "make_event",
]
