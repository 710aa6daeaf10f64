"""Runtime engine exports."""

from .commands import CommandRouter
from .engine import RuntimeBootstrap, RuntimeEngine
from .ui import RuntimeUIPublisher

__all__ = ["CommandRouter", "RuntimeBootstrap", "RuntimeEngine", "RuntimeUIPublisher"]
