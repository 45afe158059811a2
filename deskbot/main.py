"""Application entrypoint."""

from __future__ import annotations

import logging

import uvicorn

from deskbot.api import create_app
from deskbot.config import load_settings
from deskbot.db import Database

LOGGER = logging.getLogger(__name__)


def main() -> None:
    """Initialize the database and serve the chat API."""

    settings = load_settings()
    logging.basicConfig(level=settings.log_level.upper())

    db = Database(settings.database_path)
    db.initialize()

    app = create_app(settings, db=db)
    LOGGER.info("Serving deskbot on %s:%s (db=%s)", settings.api_host, settings.api_port, settings.database_path)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
