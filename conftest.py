"""Shared pytest fixtures for all test suites."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def quiet_structlog() -> Iterator[None]:
    """Run each test against a silent, non-caching structlog configuration.

    Module-level loggers cache their output stream on first use when
    setup_logging() is active, which would leak between tests.
    """
    structlog.reset_defaults()
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    yield
    structlog.reset_defaults()
