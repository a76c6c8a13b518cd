"""Pytest configuration and fixtures."""

import io
import logging

import pytest

from microtest.config import HarnessConfig
from microtest.session import initialize


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up microtest loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("microtest")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def output():
    """In-memory stream the session reports into."""
    return io.StringIO()


@pytest.fixture
def make_session(output):
    """Factory for sessions that report into ``output``."""

    def _make(**config_fields):
        return initialize(config=HarnessConfig(**config_fields), stream=output)

    return _make


@pytest.fixture
def session(make_session):
    return make_session()
