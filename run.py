"""Entry point for the Employee Directory API.

Serves the FastAPI application with Uvicorn.  Configuration such as
the upstream base URL and log level is read from environment
variables (see ``employee_directory_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server

from employee_directory_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables ``API_HOST`` and
    ``API_PORT``.  Defaults are ``0.0.0.0`` and ``8080``.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8080"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
