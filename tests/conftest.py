"""Pytest configuration and fixtures for dispatch_fu tests."""

import logging

import pytest

from dispatch_fu.constants import LOGGER_NAME


class CallRecorder:
    """Builds handlers that record each call before returning a fixed value."""

    def __init__(self):
        self.calls = []

    def handler(self, label, result=None):
        def _handler():
            self.calls.append(label)
            return label if result is None else result

        _handler.__qualname__ = f"handler_{label}"
        return _handler


@pytest.fixture
def recorder():
    """Create a fresh call recorder."""
    return CallRecorder()


@pytest.fixture
def range_classifier():
    """Classifier mapping integers onto low / mid / high."""

    def classify(value):
        if value < 3:
            return "low"
        if value < 7:
            return "mid"
        return "high"

    return classify


@pytest.fixture
def package_logger():
    """Yield the package logger at DEBUG, restoring its level and handlers afterwards."""
    pkg_logger = logging.getLogger(LOGGER_NAME)
    old_level = pkg_logger.level
    old_handlers = list(pkg_logger.handlers)
    pkg_logger.setLevel(logging.DEBUG)
    yield pkg_logger
    for handler in pkg_logger.handlers:
        if handler not in old_handlers:
            pkg_logger.removeHandler(handler)
            handler.close()
    pkg_logger.setLevel(old_level)
