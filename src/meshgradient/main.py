"""
Mesh gradient editor entry point

Wires configuration, the editing session, the frame ticker and the HTTP
surface together and runs them on one asyncio event loop.
"""

import asyncio

import uvicorn
from fastapi import FastAPI

from meshgradient.api.main import create_app
from meshgradient.engine.frame_ticker import FrameTicker
from meshgradient.managers.config_manager import ConfigManager
from meshgradient.models.enums import LogCategory, LogLevel
from meshgradient.services.editor_service import EditorSession
from meshgradient.services.event_bus import EventBus
from meshgradient.services.middleware import log_middleware
from meshgradient.services.service_container import ServiceContainer
from meshgradient.utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


async def run_api_server(app: FastAPI, host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run FastAPI/Uvicorn server in the current event loop."""
    config = uvicorn.Config(
        app=app,
        host=host,
        port=port,
        loop="asyncio",
        log_level="info",
        access_log=False,
    )
    server = uvicorn.Server(config)

    log.debug(f"Starting API server on {host}:{port}")
    await server.serve()


def build_services(config_manager: ConfigManager) -> ServiceContainer:
    """Assemble the session, bus and ticker from a loaded configuration"""
    event_bus = EventBus()
    event_bus.add_middleware(log_middleware)

    session = EditorSession(config_manager.editor, config_manager.color_manager, event_bus)

    ticker = FrameTicker(session.frame_at, fps=config_manager.editor.fps, clock=session.clock)

    return ServiceContainer(
        session=session,
        event_bus=event_bus,
        color_manager=config_manager.color_manager,
        config_manager=config_manager,
        ticker=ticker,
    )


async def main():
    configure_logger(LogLevel.DEBUG)
    log.info("Starting mesh gradient editor...")

    log.info("Loading configuration...")
    config_manager = ConfigManager()
    config_manager.load()

    services = build_services(config_manager)
    log.info("Session ready", session=repr(services.session))

    app = create_app(services)

    await services.ticker.start()
    try:
        await run_api_server(app, config_manager.editor.api_host, config_manager.editor.api_port)
    finally:
        await services.ticker.stop()
        log.info("Editor stopped", frames=services.ticker.frames_rendered)


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Interrupted by user")


if __name__ == "__main__":
    run()
