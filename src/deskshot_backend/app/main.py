"""
main.py - Entry point for DeskShot
"""

import sys
import argparse

import uvicorn

from deskshot_backend.app.server import create_app
from deskshot_backend.capture.orchestrator import ScreenshotOrchestrator, SettleDelays
from deskshot_backend.execution import create_automation
from deskshot_backend.utils.config import ServerConfig, load_config
from deskshot_backend.utils.logger import get_logger, set_level
from deskshot_backend.utils.network import access_urls


def build_orchestrator(config: ServerConfig) -> ScreenshotOrchestrator:
    delays = SettleDelays(
        activate=config.activate_settle,
        subview=config.subview_settle,
        fullscreen=config.fullscreen_settle,
    )
    return ScreenshotOrchestrator(
        automation=create_automation(),
        output_root=config.output_root,
        delays=delays,
    )


def log_banner(config: ServerConfig, logger) -> None:
    """Tell the operator where the server can be reached."""
    logger.info("Screenshot server running on port %s", config.port)
    logger.info("Saving screenshots under %s", config.output_root)
    logger.info("Access URLs:")
    try:
        for url in access_urls(config.host, config.port):
            logger.info("- %s", url)
    except Exception as e:
        logger.error("Error listing network interfaces: %s", e)

    logger.info(
        "To test, use:\n"
        "curl -X POST http://localhost:%s/invoke -H \"Content-Type: application/json\" "
        "-d '{\"method\": \"callTool\", \"params\": {\"name\": \"capture\", \"arguments\": "
        "{\"region\": \"full\", \"windowName\": \"Calendar\", \"switchToWindow\": true}}}'",
        config.port,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="DeskShot screenshot server")
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file")
    parser.add_argument("--host", type=str, default=None, help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind (default: 8000)")
    parser.add_argument("--output-root", type=str, default=None, help="Where dated screenshot folders go (default: ~/Downloads)")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING or ERROR")
    args = parser.parse_args(argv)

    try:
        config = load_config(
            args.config,
            host=args.host,
            port=args.port,
            output_root=args.output_root,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"Error loading config: {e}")
        sys.exit(1)

    set_level(config.log_level)
    logger = get_logger("deskshot_backend.app.main")

    app = create_app(build_orchestrator(config))
    log_banner(config, logger)

    try:
        uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    except KeyboardInterrupt:
        logger.info("Server stopped by user.")


if __name__ == "__main__":
    main()
