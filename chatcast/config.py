"""Runtime settings read from the environment (and a .env file, if present)."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    strict_delivery: bool = False


def _parse_level(raw: str) -> int:
    value = raw.strip().upper()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def load_settings() -> Settings:
    """Load settings. CHATCAST_LOG_LEVEL and CHATCAST_STRICT_DELIVERY override defaults."""
    load_dotenv()
    level = _parse_level(os.environ.get("CHATCAST_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    strict = os.environ.get("CHATCAST_STRICT_DELIVERY", "").strip().lower() in _TRUTHY
    return Settings(log_level=level, strict_delivery=strict)
