from __future__ import annotations

import logging

from app.core.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Servers whose loggers follow the proxy's level.
SERVER_LOGGERS = ("uvicorn.error", "uvicorn.access")

# Chatty client libraries, only let through when debugging.
CLIENT_LOGGERS = ("google_genai", "httpx")


def resolve_level(settings: Settings) -> int:
    level = logging.getLevelName(settings.resolved_log_level)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings) -> int:
    level = resolve_level(settings)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level)

    client_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)

    return level
