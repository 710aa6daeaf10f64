"""UI server settings validated against the bundled page and websocket routes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from app_config_schema import UIServerSettings

WEBSOCKET_PATH = "/ws"
ROOT_PATH = "/"
INDEX_PATH = "/index.html"
HEALTHZ_PATH = "/healthz"

_MAX_PORT = 65535


class ServerConfigurationError(Exception):
    """Raised when UI server configuration is invalid."""


def default_index_file() -> Path:
    """Timer page shipped as package data next to this module."""
    return Path(__file__).resolve().parent / "static" / "index.html"


def _check_index_file(raw: str) -> None:
    if not raw:
        raise ServerConfigurationError("ui_server.index_file cannot be empty")
    path = Path(raw)
    if not path.is_file():
        raise ServerConfigurationError(f"ui_server.index_file is not a file: {path}")


@dataclass(frozen=True)
class UIServerConfig:
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8765
    index_file: str = ""

    def __post_init__(self) -> None:
        if not self.host.strip():
            raise ServerConfigurationError("ui_server.host cannot be empty")
        if not 1 <= self.port <= _MAX_PORT:
            raise ServerConfigurationError(
                f"ui_server.port must be in [1, {_MAX_PORT}], got: {self.port}"
            )
        # A disabled server never reads the page.
        if self.enabled:
            _check_index_file(self.index_file)

    @property
    def websocket_path(self) -> str:
        return WEBSOCKET_PATH

    @property
    def http_url(self) -> str:
        return f"http://{self.host}:{self.port}{ROOT_PATH}"

    @classmethod
    def from_settings(cls, settings: UIServerSettings) -> "UIServerConfig":
        return cls(
            enabled=settings.enabled,
            host=settings.host,
            port=settings.port,
            index_file=settings.index_file or str(default_index_file()),
        )
