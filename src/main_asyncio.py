"""
main_asyncio.py — Application entry point for the RGBW bulb relay
-----------------------------------------------------------------

Responsible for:
- loading configuration (config.yaml + environment)
- wiring the service container into the API
- running the FastAPI app under uvicorn until Ctrl+C
"""

import sys

# Set UTF-8 encoding for output before anything logs (log symbols are non-ASCII)
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore

import asyncio
import uvicorn
from fastapi import FastAPI

from api.main import create_app
from api.dependencies import set_service_container
from managers import ConfigManager
from models.config import AppConfig
from models.enums import LogCategory
from services import ServiceContainer
from utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)


def build_app(config: AppConfig) -> FastAPI:
    """Create the service container and the FastAPI app for a loaded config."""
    services = ServiceContainer.from_config(config)
    set_service_container(services)

    return create_app(
        docs_enabled=config.server.docs_enabled,
        cors_origins=list(config.server.cors_origins),
    )


async def run_api_server(app: FastAPI, host: str = "0.0.0.0", port: int = 8080) -> None:
    """
    Run FastAPI/Uvicorn server in the current event loop.

    The server runs until cancelled or until uvicorn handles SIGINT/SIGTERM.
    """
    config = uvicorn.Config(
        app=app,
        host=host,
        port=port,
        loop="asyncio",
        log_level="info",
        access_log=False,
    )
    server = uvicorn.Server(config)

    try:
        log.info(f"Starting API server on {host}:{port}")
        await server.serve()
    except asyncio.CancelledError:
        log.debug("API server cancelled")
        raise


async def main():
    """Main async entry point."""
    config_manager = ConfigManager()
    config = config_manager.load()

    configure_logger(config.logging.level, config.logging.use_colors)
    log.info("Starting RGBW bulb relay...")

    app = build_app(config)
    await run_api_server(app, host=config.server.host, port=config.server.port)

    log.info("RGBW bulb relay stopped")


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Interrupted")


if __name__ == "__main__":
    run()
