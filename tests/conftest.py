import logging

import pytest

from app.config import settings


@pytest.fixture()
def ist_display_settings(monkeypatch):
    """Switch the configured display timezone to IST for one test."""
    monkeypatch.setattr(settings, "DISPLAY_TIMEZONE", "IST")
    yield settings


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("APP_ENV", "LOG_LEVEL", "DISPLAY_TIMEZONE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
