"""Pytest configuration and fixtures."""

import logging

import pytest

from shouldbe.reporting import AssertionReporter, set_reporter


@pytest.fixture(autouse=True)
def default_reporter():
    """Every test starts and ends with the raising reporter installed."""
    set_reporter(AssertionReporter())
    yield
    set_reporter(AssertionReporter())


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Drop handlers attached to shouldbe loggers so files are not shared between tests."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("shouldbe"):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()
