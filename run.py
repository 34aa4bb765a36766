"""Entry point for running the recommendations API.

Starts the FastAPI application with uvicorn.  Host, port and log
level come from the settings in ``recommendations_api.app.core.config``
(``HOST``, ``PORT`` and ``LOG_LEVEL`` environment variables).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from recommendations_api.app.core.config import settings
from recommendations_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
