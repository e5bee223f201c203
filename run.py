"""Entry point for the music library server.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, where the catalog
snapshot ``MUSICAL_LIBRARY.txt`` lives by default.

Configuration such as HOST, PORT, LIBRARY_PATH and LOG_LEVEL is read
from environment variables; see ``music_library_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from music_library_api.app.core.config import settings
from music_library_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted.

    uvicorn handles SIGINT/SIGTERM itself: it stops accepting
    connections, waits for in‑flight requests and then runs the
    application's shutdown phase, which writes the catalog snapshot.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "The server is listening on %s:%s", settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
