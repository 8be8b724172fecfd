"""Observability: logging and metrics for the broadcast registry and chat demo."""

from chatcast.observability.logger import get_logger
from chatcast.observability.metrics import Metrics

__all__ = ["get_logger", "Metrics"]
