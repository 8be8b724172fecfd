"""Structured logging for broadcast events (register, unregister, deliver)."""

import logging
import sys
from typing import Optional


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a configured logger; level defaults to CHATCAST_LOG_LEVEL."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        if level is None:
            from chatcast.config import load_settings
            level = load_settings().log_level
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
            )
        )
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
