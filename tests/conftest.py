"""Pytest configuration and shared fixtures."""

import pytest

from chatcast.registry import BroadcastRegistry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep CHATCAST_* settings from the outer environment out of the tests."""
    monkeypatch.delenv("CHATCAST_STRICT_DELIVERY", raising=False)
    monkeypatch.delenv("CHATCAST_LOG_LEVEL", raising=False)


@pytest.fixture
def registry():
    return BroadcastRegistry("test", strict=False)


class Recorder:
    """Callable that appends (name, args) to a shared log when called."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    def __call__(self, *args):
        self.log.append((self.name,) + args)


@pytest.fixture
def deliveries():
    return []


@pytest.fixture
def abc(deliveries):
    return Recorder("A", deliveries), Recorder("B", deliveries), Recorder("C", deliveries)
