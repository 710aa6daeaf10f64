"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class LoggingSettings:
    """Log output settings from `[logging]`."""
    level: str = "INFO"


@dataclass(frozen=True)
class PomodoroSettings:
    """Startup behaviour from `[pomodoro]`.

    Phase durations and the tick interval are fixed and not configurable.
    """
    auto_start: bool = False


@dataclass(frozen=True)
class NotifierSettings:
    """Alert renderers enabled from `[notifier]`."""
    log_alerts: bool = True
    ui_alerts: bool = True


@dataclass(frozen=True)
class UIServerSettings:
    """Static UI and websocket settings from `[ui_server]`."""
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8765
    index_file: str = ""


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    pomodoro: PomodoroSettings = field(default_factory=PomodoroSettings)
    notifier: NotifierSettings = field(default_factory=NotifierSettings)
    ui_server: UIServerSettings = field(default_factory=UIServerSettings)
    source_file: str = ""
