import logging
import signal
import sys
from typing import Optional

from app_config import AppConfigurationError, load_app_config
from runtime import RuntimeBootstrap, RuntimeEngine
from server import ServerConfigurationError, UIServer, UIServerConfig


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("focus_timer")


def setup_signal_handlers(engine: RuntimeEngine) -> None:
    """Set up graceful shutdown on SIGTERM and SIGINT."""

    def signal_handler(signum: int, frame) -> None:
        del frame
        logging.getLogger("focus_timer").info(
            "%s received, stopping...",
            signal.Signals(signum).name,
        )
        engine.stop()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)


def main() -> int:
    """Run the focus/break timer service."""
    logger = setup_logging(level=logging.INFO)

    try:
        app_config = load_app_config()
    except AppConfigurationError as error:
        logger.error("App configuration error: %s", error)
        return 1

    logging.getLogger().setLevel(app_config.logging.level)
    if app_config.source_file:
        logger.info("Loaded runtime config: %s", app_config.source_file)
    else:
        logger.info("No config file found, using defaults")

    ui_server: Optional[UIServer] = None
    try:
        ui_server_config = UIServerConfig.from_settings(app_config.ui_server)
    except ServerConfigurationError as error:
        logger.error("UI server configuration error: %s", error)
        logger.warning("Continuing without UI server.")
        ui_server_config = None

    if ui_server_config and ui_server_config.enabled:
        try:
            ui_server = UIServer(
                config=ui_server_config,
                logger=logging.getLogger("ui_server"),
            )
            logger.info("Starting UI server...")
            ui_server.start(timeout_seconds=5.0)
            logger.info(
                "UI server ready at http://%s:%d",
                ui_server.host,
                ui_server.port,
            )
        except Exception as error:
            logger.error("UI server startup failed: %s", error)
            logger.warning("Continuing without UI server.")
            ui_server = None

    engine = RuntimeEngine(
        RuntimeBootstrap(
            logger=logger,
            app_config=app_config,
            ui_server=ui_server,
        )
    )
    setup_signal_handlers(engine)
    return engine.run()


if __name__ == "__main__":
    sys.exit(main())
