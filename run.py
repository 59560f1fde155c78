"""Entry point for the Voting API.

Starts the FastAPI application with Uvicorn.  Host, port and log
level come from the ``HOST``, ``PORT`` and ``LOG_LEVEL`` environment
variables (see ``voting_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from voting_api.app.core.config import settings
from voting_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
