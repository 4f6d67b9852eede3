"""Entry point for the Politely Failed API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker or a process manager, where you only specify a single Python
file to run.

Configuration such as MESSAGES_FILE_PATH, HOST, PORT and LOG_LEVEL may
be placed in a `.env` file in the same directory.

Usage:
    python run.py            # serve the API
    python run.py --check    # validate the messages file and exit
"""
import argparse
import asyncio
import logging
import sys

from uvicorn import Config, Server

from politely_failed_api.app.core.config import get_messages_path, settings
from politely_failed_api.app.core.errors import LoadError
from politely_failed_api.app.core.logging_config import setup_logging
from politely_failed_api.app.main import create_app
from politely_failed_api.app.services.message_store import MessageStore

logger = logging.getLogger("run")


async def run_api() -> bool:
    """Start the API using Uvicorn.

    Host and port are read from settings (`HOST` and `PORT`).
    Defaults are `0.0.0.0` and `3000`.
    """
    app = create_app(settings)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logger.info("Serving on http://%s:%s (health: /health, API: /api/v1)", settings.host, settings.port)
    await server.serve()
    return server.started


def check_messages() -> int:
    """Load and validate the configured messages file; return an exit code."""
    path = get_messages_path(settings)
    store = MessageStore(path)
    try:
        database = store.load()
    except LoadError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"{path}: version {database.version}, {database.total()} messages")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Politely Failed API server")
    parser.add_argument("--check", action="store_true", help="validate the messages file and exit")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level, settings.log_file or None)
    if args.check:
        return check_messages()

    try:
        started = asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        return 0
    if not started:
        logger.error("Server failed to start")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
