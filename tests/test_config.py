import logging

from chatcast.config import load_settings
from chatcast.observability import get_logger


def test_defaults():
    settings = load_settings()

    assert settings.log_level == logging.WARNING
    assert settings.strict_delivery is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CHATCAST_LOG_LEVEL", "debug")
    monkeypatch.setenv("CHATCAST_STRICT_DELIVERY", "true")

    settings = load_settings()

    assert settings.log_level == logging.DEBUG
    assert settings.strict_delivery is True


def test_invalid_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("CHATCAST_LOG_LEVEL", "chatty")

    assert load_settings().log_level == logging.WARNING


def test_get_logger_configures_once():
    logger = get_logger("chatcast.tests.once", level=logging.INFO)
    again = get_logger("chatcast.tests.once", level=logging.DEBUG)

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
