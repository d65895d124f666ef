"""Entry point for the PersonStore API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (see
``person_store_api.app.core.config``); the defaults are ``0.0.0.0``
and ``3000``.

Usage:
    python run.py
    PORT=8080 python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from person_store_api.app.core.config import settings
from person_store_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on port %s...", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
