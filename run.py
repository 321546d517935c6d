"""Entry point for the Users API server.

Starts the FastAPI application with Uvicorn.  Host, port, storage back
end and log level are read from environment variables (see
``users_api.app.core.config``), for example::

    USER_STORE=sqlite SEED_USERS=1 PORT=3000 python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        # Logging is already configured by create_app().
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
