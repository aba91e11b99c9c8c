from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    title: str
    database_name: str
    log_level: str
    host: str
    port: int


def _parse_port(raw_value: str) -> int:
    try:
        port = int(raw_value)
    except ValueError:
        logger.warning("Invalid PORT value '%s'; defaulting to %s", raw_value, DEFAULT_PORT)
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning("PORT value %s out of range; defaulting to %s", port, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def _parse_log_level(raw_value: str) -> str:
    level = raw_value.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Invalid LOG_LEVEL value '%s'; defaulting to %s", raw_value, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


@lru_cache
def get_settings() -> Settings:
    title = os.getenv("TODO_API_TITLE", "Todo API")
    database_name = os.getenv("TODO_DATABASE_NAME", "TodoList")
    log_level = _parse_log_level(os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))
    host = os.getenv("HOST", "0.0.0.0")
    port = _parse_port(os.getenv("PORT", str(DEFAULT_PORT)))

    return Settings(
        title=title,
        database_name=database_name,
        log_level=log_level,
        host=host,
        port=port,
    )
