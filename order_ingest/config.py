"""Central configuration for the order ingestion package."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Context
from functools import lru_cache

from order_ingest.errors import ConfigError

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(slots=True, frozen=True)
class Settings:
    decimal_context: Context
    encoding: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``ORDER_INGEST_*`` environment variables.

        Raises:
            ConfigError: If the log level or encoding is not recognised.
        """
        encoding = os.getenv("ORDER_INGEST_ENCODING", DEFAULT_ENCODING).strip() or DEFAULT_ENCODING
        log_level = os.getenv("ORDER_INGEST_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        return cls(
            decimal_context=Context(prec=28),
            encoding=_check_encoding(encoding),
            log_level=parse_log_level(log_level),
        )


def parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown log level {raw!r}")
    return level


def _check_encoding(encoding: str) -> str:
    try:
        "".encode(encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown text encoding {encoding!r}") from exc
    return encoding


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process, read from the environment on first use.

    Raises:
        ConfigError: If an ``ORDER_INGEST_*`` variable is invalid.
    """
    return Settings.from_env()
