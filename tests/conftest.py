# tests/conftest.py
import logging

import pytest
import structlog

from envsugar import EnvAccessor, MemoryEnvironment, configure_structlog


@pytest.fixture
def environ():
    """Empty in-memory environment table."""
    return MemoryEnvironment()


@pytest.fixture
def accessor(environ):
    return EnvAccessor(environ)


@pytest.fixture
def reset_logging():
    """Leave structlog unconfigured before and after the test."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def debug_logging(reset_logging):
    """Configure structlog at DEBUG so capture_logs sees every event."""
    configure_structlog(logging.DEBUG)
    yield
