"""Metrics for observability (broadcasts, deliveries, skips, failures)."""

from typing import Dict


class Metrics:
    """In-memory counters and gauges for one registry."""

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._gauges: Dict[str, int] = {}

    def increment(self, name: str, value: int = 1) -> None:
        self._counters[name] = self._counters.get(name, 0) + value

    def set_gauge(self, name: str, value: int) -> None:
        self._gauges[name] = value

    def get_counter(self, name: str) -> int:
        return self._counters.get(name, 0)

    def record_broadcast(self, delivered: int, skipped: int, failed: int) -> None:
        """Account for one finished broadcast."""
        self.increment("broadcasts")
        self.increment("deliveries", delivered)
        self.increment("skipped", skipped)
        self.increment("delivery_failures", failed)

    def snapshot(self) -> Dict[str, Dict[str, int]]:
        return {
            "counters": dict(self._counters),
            "gauges": dict(self._gauges),
        }
