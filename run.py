"""Entry point for the Order Store API.

Reads configuration from the environment (and a `.env` file in the
working directory), builds the FastAPI application and serves it with
Uvicorn on the address given by `SERVER` (``host:port``, default
``127.0.0.1:8000``).  Ctrl‑C stops the server gracefully.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from order_store_api.app.core.config import settings
from order_store_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    host, port = settings.server_address()
    logging.getLogger(__name__).info("Launching server: http://%s:%s/", host, port)
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
